"""Shared fixtures: an isolated scratch directory and generated sample documents."""

import io
import os
import tempfile

import pytest

os.environ["TEMP_DIR"] = tempfile.mkdtemp(prefix="docjson-tests-")
os.environ.setdefault("MAX_UPLOAD_MB", "10")

from docx import Document  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from openpyxl import Workbook  # noqa: E402
from reportlab.lib.pagesizes import A4  # noqa: E402
from reportlab.pdfgen import canvas  # noqa: E402

from docjson.main import app  # noqa: E402


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def pdf_bytes():
    """Two-page PDF with a title and an author."""
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=A4)
    c.setTitle("Quarterly Report")
    c.setAuthor("Finance Team")
    c.drawString(72, 760, "Hello PDF first page")
    c.showPage()
    c.drawString(72, 760, "Second page content")
    c.showPage()
    c.save()
    return buffer.getvalue()


@pytest.fixture
def docx_bytes():
    document = Document()
    document.add_paragraph("Meeting notes")
    document.add_paragraph("Action items follow.")
    table = document.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Owner"
    table.cell(0, 1).text = "Task"
    table.cell(1, 0).text = "Dana"
    table.cell(1, 1).text = "Ship release"
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def build_workbook(sheets):
    """Build an .xlsx from ``{sheet_name: [row, ...]}`` where each row is a list of cells."""
    workbook = Workbook()
    workbook.remove(workbook.active)
    for name, rows in sheets.items():
        sheet = workbook.create_sheet(title=name)
        for row in rows:
            sheet.append(row)
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def xlsx_bytes():
    return build_workbook({"Sheet1": [["a"], [1]]})


@pytest.fixture
def make_workbook():
    return build_workbook
