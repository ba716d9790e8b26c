"""FastAPI server for PO to CSV conversion."""

from typing import Optional
from urllib.parse import quote

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field

from .. import __version__
from ..config import ConverterConfig
from ..converter import EmptyInputError, convert_text, status_for_error
from ..utils.logging import get_logger, setup_logging_from_config

logger = get_logger(__name__)

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"


def content_disposition(filename: str) -> str:
    """Attachment header carrying an ASCII fallback and the UTF-8 name."""
    fallback = filename.encode("ascii", "replace").decode("ascii").replace('"', "_")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


class ConvertRequest(BaseModel):
    """Request model for conversion endpoints."""

    filename: str = Field(default="translations.po", description="Original PO file name")
    content: str = Field(..., description="Full text of the PO file")


class PreviewResponse(BaseModel):
    """Response model for preview endpoint."""

    filename: str = Field(..., description="Name of the CSV file")
    row_count: int = Field(..., description="Number of data rows")
    preview: str = Field(..., description="Leading part of the CSV text")
    status: str


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    version: str


def create_app(config: Optional[ConverterConfig] = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        config: Converter configuration (defaults if None)

    Returns:
        Configured FastAPI application
    """
    config = config or ConverterConfig()

    app = FastAPI(
        title="po2csv",
        description="Convert gettext PO files into key/source/target CSV",
        version=__version__,
    )

    def run_conversion(request: ConvertRequest):
        try:
            return convert_text(
                request.content,
                filename=request.filename,
                config=config,
            )
        except EmptyInputError as e:
            logger.error(f"No entries in {request.filename}")
            raise HTTPException(status_code=422, detail=status_for_error(e))
        except Exception as e:
            logger.error(f"Conversion error for {request.filename}: {e}")
            raise HTTPException(status_code=500, detail=status_for_error(e))

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Check API health."""
        return HealthResponse(status="healthy", version=__version__)

    @app.post("/convert")
    def convert(request: ConvertRequest):
        """Convert a PO file and return the CSV as an attachment.

        Args:
            request: File name and PO text

        Returns:
            CSV download response
        """
        result = run_conversion(request)
        logger.info(f"Converted {request.filename}: {result.row_count} rows")

        return Response(
            content=result.csv_text.encode("utf-8"),
            media_type=CSV_MEDIA_TYPE,
            headers={
                "Content-Disposition": content_disposition(result.output_filename),
                "X-Status": result.status,
            },
        )

    @app.post("/preview", response_model=PreviewResponse)
    def preview(request: ConvertRequest):
        """Convert a PO file and return the start of the CSV.

        Args:
            request: File name and PO text

        Returns:
            Preview response
        """
        result = run_conversion(request)

        return PreviewResponse(
            filename=result.output_filename,
            row_count=result.row_count,
            preview=result.preview,
            status=result.status,
        )

    return app


def run_server(
    host: Optional[str] = None,
    port: Optional[int] = None,
    config: Optional[ConverterConfig] = None,
) -> None:
    """Run the conversion server.

    Args:
        host: Host to bind to (config value if None)
        port: Port to listen on (config value if None)
        config: Converter configuration
    """
    import uvicorn

    config = config or ConverterConfig()
    setup_logging_from_config(config)

    app = create_app(config)

    uvicorn.run(
        app,
        host=host or config.host,
        port=port or config.port,
    )
