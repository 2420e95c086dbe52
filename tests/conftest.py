"""Pytest fixtures and shared test configuration.

Fixtures:
    - make_pdf: Builds small text PDFs in memory
    - hello_pdf: One-page PDF whose text is "Hello world"
    - blank_pdf: Two blank pages written with pypdf
    - stub_client: Generation client double that records prompts
    - controller: TurnController wired to the stub client
    - async_client: HTTPX client for API testing against the controller
"""

import asyncio
import io
from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from pypdf import PdfWriter

from vchat.api.app import create_app
from vchat.conversation.controller import TurnController, get_turn_controller
from vchat.generation.client import GenerationResult
from vchat.models.schemas import GenerationOutcome


def build_pdf(pages: list[list[str]]) -> bytes:
    """Write a minimal PDF with one Helvetica text line per entry.

    Args:
        pages: For each page, the lines of text drawn top to bottom.

    Returns:
        Bytes of a well-formed PDF with a correct cross-reference table.
    """
    kids = " ".join(f"{4 + 2 * i} 0 R" for i in range(len(pages)))
    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for i, lines in enumerate(pages):
        ops = ["BT", "/F1 12 Tf", "72 720 Td"]
        for j, line in enumerate(lines):
            if j:
                ops.append("0 -16 Td")
            ops.append(f"({line}) Tj")
        ops.append("ET")
        stream = "\n".join(ops).encode("latin-1")
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {5 + 2 * i} 0 R >>"
            ).encode()
        )
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


class StubGenerationClient:
    """Stands in for GenerationClient.

    Returns queued results in order, then a numbered success reply. When
    ``gate`` is set, every call waits on it before answering.
    """

    def __init__(self, *results: GenerationResult) -> None:
        self.results = list(results)
        self.prompts: list[str] = []
        self.gate: asyncio.Event | None = None

    async def generate(self, prompt: str) -> GenerationResult:
        self.prompts.append(prompt)
        if self.gate is not None:
            await self.gate.wait()
        if self.results:
            return self.results.pop(0)
        return GenerationResult(
            outcome=GenerationOutcome.SUCCESS,
            text=f"reply {len(self.prompts)}",
        )


@pytest.fixture
def make_pdf() -> Callable[[list[list[str]]], bytes]:
    """Return the in-memory PDF builder."""
    return build_pdf


@pytest.fixture
def hello_pdf() -> bytes:
    """One-page PDF whose extracted text is "Hello world"."""
    return build_pdf([["Hello world"]])


@pytest.fixture
def blank_pdf() -> bytes:
    """Two blank pages written with pypdf."""
    writer = PdfWriter()
    writer.add_blank_page(width=200, height=200)
    writer.add_blank_page(width=200, height=200)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@pytest.fixture
def stub_client() -> StubGenerationClient:
    return StubGenerationClient()


@pytest.fixture
def controller(stub_client: StubGenerationClient) -> TurnController:
    """Turn controller with a fresh session and the stub client."""
    return TurnController(client=stub_client)


@pytest.fixture
async def async_client(controller: TurnController) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        AsyncClient whose requests reach the test controller.
    """
    app = create_app()
    app.dependency_overrides[get_turn_controller] = lambda: controller
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
