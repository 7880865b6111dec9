"""Tests for the end-to-end invoice workflow"""
from unittest.mock import Mock

import pytest

from invoice_inventory.config import default_config
from invoice_inventory.inventory_transformer import CounterSuffixSource, InventoryUpdateTransformer
from invoice_inventory.invoice_workflow import (
    InvoiceProcessingError,
    InvoiceWorkflow,
    UnsupportedFileTypeError,
)


@pytest.fixture
def ocr(english_invoice_text):
    service = Mock()
    service.extract_text_from_pdf.return_value = english_invoice_text
    service.extract_text_from_image.return_value = english_invoice_text
    return service


@pytest.fixture
def translator():
    service = Mock()
    service.detect_language.return_value = "ja"
    service.translate.return_value = "translated text"
    return service


@pytest.fixture
def make_workflow(tmp_path):
    def _make(**kwargs):
        kwargs.setdefault(
            "transformer",
            InventoryUpdateTransformer(suffix_source=CounterSuffixSource(), config=default_config()),
        )
        return InvoiceWorkflow(config_path=str(tmp_path / "absent.yaml"), **kwargs)
    return _make


@pytest.fixture
def invoice_file(tmp_path):
    def _write(name):
        path = tmp_path / name
        path.write_bytes(b"fake invoice bytes")
        return path
    return _write


def test_pdf_goes_to_pdf_extraction(make_workflow, ocr, invoice_file):
    workflow = make_workflow(ocr=ocr)
    path = invoice_file("invoice.pdf")

    result = workflow.process_invoice(str(path))

    ocr.extract_text_from_pdf.assert_called_once_with(b"fake invoice bytes")
    ocr.extract_text_from_image.assert_not_called()
    assert result.file_path == str(path)
    assert result.invoice.invoice_id == "12345"
    assert [i.sku for i in result.inventory_update.items] == ["wine-000001", "beer-000002"]


@pytest.mark.parametrize("name", ["invoice.jpg", "invoice.JPEG", "invoice.png"])
def test_images_go_to_image_extraction(make_workflow, ocr, invoice_file, name):
    workflow = make_workflow(ocr=ocr)

    workflow.process_invoice(str(invoice_file(name)))

    ocr.extract_text_from_image.assert_called_once()
    ocr.extract_text_from_pdf.assert_not_called()


def test_unsupported_extension(make_workflow, ocr, invoice_file):
    workflow = make_workflow(ocr=ocr)

    with pytest.raises(UnsupportedFileTypeError):
        workflow.process_invoice(str(invoice_file("invoice.docx")))
    ocr.extract_text_from_pdf.assert_not_called()


def test_missing_file(make_workflow, ocr, tmp_path):
    with pytest.raises(FileNotFoundError):
        make_workflow(ocr=ocr).process_invoice(str(tmp_path / "nowhere.pdf"))


def test_no_ocr_service(make_workflow, invoice_file):
    with pytest.raises(InvoiceProcessingError):
        make_workflow().process_invoice(str(invoice_file("invoice.pdf")))


def test_ocr_failure_is_wrapped(make_workflow, ocr, invoice_file):
    ocr.extract_text_from_pdf.side_effect = RuntimeError("engine crashed")

    with pytest.raises(InvoiceProcessingError, match="engine crashed"):
        make_workflow(ocr=ocr).process_invoice(str(invoice_file("invoice.pdf")))


def test_process_text_without_translator(make_workflow, english_invoice_text):
    result = make_workflow().process_text(english_invoice_text)

    assert result.file_path is None
    assert result.translation == english_invoice_text
    assert result.source_language is None
    assert result.confidence == 0.75
    assert result.inventory_update.date == "2023-10-15"
    assert result.processed_at


def test_translates_foreign_text(make_workflow, translator, japanese_invoice_text):
    result = make_workflow(translator=translator).process_text(japanese_invoice_text)

    translator.translate.assert_called_once_with(japanese_invoice_text, "ja", "en")
    assert result.source_language == "ja"
    assert result.translation == "translated text"
    assert result.invoice.currency == "JPY"


def test_skips_translation_for_target_language(make_workflow, translator, english_invoice_text):
    translator.detect_language.return_value = "en"

    result = make_workflow(translator=translator).process_text(english_invoice_text)

    translator.translate.assert_not_called()
    assert result.translation == english_invoice_text


def test_translation_failure_keeps_original(make_workflow, translator, japanese_invoice_text):
    translator.translate.side_effect = RuntimeError("quota exceeded")

    result = make_workflow(translator=translator).process_text(japanese_invoice_text)

    assert result.source_language == "ja"
    assert result.translation == japanese_invoice_text


def test_detection_failure_keeps_original(make_workflow, translator, japanese_invoice_text):
    translator.detect_language.side_effect = RuntimeError("offline")

    result = make_workflow(translator=translator).process_text(japanese_invoice_text)

    assert result.source_language is None
    assert result.translation == japanese_invoice_text


def test_record_uses_camel_case(make_workflow, english_invoice_text):
    record = make_workflow().process_text(english_invoice_text, file_path="in/invoice.pdf").to_record()

    assert record["filePath"] == "in/invoice.pdf"
    assert record["invoice"]["invoiceId"] == "12345"
    assert record["inventoryUpdate"]["items"][0]["sku"] == "wine-000001"
    assert "processedAt" in record
