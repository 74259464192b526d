# api/config.py
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

AFAD_API_URL = "https://deprem.afad.gov.tr/apiv2/event/filter"
DEFAULT_PORT = 8082
DEFAULT_STATIC_DIR = Path(__file__).resolve().parent / "static"


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    api_url: str = AFAD_API_URL
    timeout: float = 15.0
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    static_dir: Path = DEFAULT_STATIC_DIR
    open_browser: bool = True
    log_level: str = "INFO"

    @property
    def local_url(self) -> str:
        return f"http://localhost:{self.port}"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            api_url=os.getenv("AFAD_API_URL", AFAD_API_URL),
            timeout=float(os.getenv("AFAD_TIMEOUT", "15")),
            host=os.getenv("EQ_ROWS_HOST", "127.0.0.1"),
            port=int(os.getenv("EQ_ROWS_PORT", str(DEFAULT_PORT))),
            static_dir=Path(os.getenv("EQ_ROWS_STATIC_DIR", str(DEFAULT_STATIC_DIR))),
            open_browser=_flag(os.getenv("EQ_ROWS_OPEN_BROWSER", "1")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
