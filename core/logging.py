import logging
import sys

from core.config import settings


def configure_logging(level: str | None = None) -> None:
    """
    Configure logging for the whole app.
    Call this once before the Streamlit pages render.
    """
    logging.basicConfig(
        level=getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


logger = logging.getLogger("applicant_registry")
