"""
Invoice processing workflow
Combines OCR, parsing, inventory mapping and translation for one invoice

The OCR and translation services are collaborators passed in by the
caller:

  ocr         .extract_text_from_pdf(data: bytes) -> str
              .extract_text_from_image(data: bytes) -> str
  translator  .detect_language(text: str) -> str
              .translate(text: str, source: str, target: str) -> str
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from invoice_inventory.config import load_config
from invoice_inventory.extractor import InvoiceParser
from invoice_inventory.inventory_transformer import InventoryUpdateTransformer
from invoice_inventory.models import ProcessedInvoice


class InvoiceProcessingError(Exception):
    """Base error for the invoice workflow."""


class UnsupportedFileTypeError(InvoiceProcessingError, ValueError):
    """File extension is not one the OCR collaborator accepts."""


class InvoiceWorkflow:
    """
    End-to-end invoice pipeline

    Workflow:
    1. Validate the file type
    2. Extract text with the OCR collaborator
    3. Parse structured invoice data
    4. Build the inventory update
    5. Translate the text when it is not in the target language
    """

    def __init__(
        self,
        ocr: Any = None,
        translator: Any = None,
        parser: Optional[InvoiceParser] = None,
        transformer: Optional[InventoryUpdateTransformer] = None,
        config_path: Optional[str] = None,
    ):
        self.config = load_config(config_path)
        settings = self.config['workflow']

        self.ocr = ocr
        self.translator = translator
        self.parser = parser or InvoiceParser()
        self.transformer = transformer or InventoryUpdateTransformer(config=self.config)

        self.allowed_extensions = {ext.lower() for ext in settings['allowed_extensions']}
        self.target_language = settings['target_language']
        self.translate = bool(settings['translate'])

    def validate_file(self, file_path: str) -> Path:
        """Check extension and existence; returns the resolved path"""
        path = Path(file_path)
        ext = path.suffix.lower()
        if ext not in self.allowed_extensions:
            logger.error(f"Unsupported file type: {ext}")
            raise UnsupportedFileTypeError(
                f"Unsupported file type: {ext}. Allowed: {', '.join(sorted(self.allowed_extensions))}"
            )
        if not path.exists():
            raise FileNotFoundError(f"Invoice file not found: {file_path}")
        return path

    def extract_text(self, file_path: str) -> str:
        """Run the OCR collaborator over one invoice file"""
        if self.ocr is None:
            raise InvoiceProcessingError("No OCR service configured")

        path = self.validate_file(file_path)
        data = path.read_bytes()

        try:
            if path.suffix.lower() == '.pdf':
                return self.ocr.extract_text_from_pdf(data) or ''
            return self.ocr.extract_text_from_image(data) or ''
        except Exception as e:
            logger.error(f"OCR failed for {path.name}: {e}")
            raise InvoiceProcessingError(f"OCR failed for {path.name}: {e}") from e

    def process_invoice(self, file_path: str) -> ProcessedInvoice:
        """
        Process a single invoice file

        Args:
            file_path: Path to a PDF or image invoice

        Returns:
            ProcessedInvoice with parsed data and inventory update
        """
        logger.info(f"Processing invoice: {file_path}")
        text = self.extract_text(file_path)
        return self.process_text(text, file_path=str(file_path))

    def process_text(self, text: str, file_path: Optional[str] = None) -> ProcessedInvoice:
        """Parse already-extracted invoice text"""
        parsed = self.parser.parse(text)
        update = self.transformer.transform(parsed)
        source_language, translation = self._translate(text)

        return ProcessedInvoice(
            file_path=file_path,
            invoice=parsed,
            inventory_update=update,
            translation=translation,
            source_language=source_language,
            confidence=self.parser.confidence_score(parsed),
            processed_at=datetime.now(timezone.utc).isoformat(),
        )

    def _translate(self, text: str):
        """(source_language, translated text); the original text on failure"""
        if not text or self.translator is None or not self.translate:
            return None, text or ''

        try:
            language = self.translator.detect_language(text)
        except Exception as e:
            logger.warning(f"Language detection failed: {e}")
            return None, text

        if not language or language == self.target_language:
            return language, text

        try:
            return language, self.translator.translate(text, language, self.target_language)
        except Exception as e:
            logger.warning(f"Translation {language}->{self.target_language} failed: {e}")
            return language, text
