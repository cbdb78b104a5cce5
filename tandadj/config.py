"""Configuration: env, data paths, OpenAI planner settings."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of tandadj package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so OPENAI_API_KEY etc. are set
load_dotenv(BASE_DIR / ".env")

MUSIC_ROOT = Path(os.getenv("MUSIC_ROOT", str(Path.home() / "Music"))).expanduser()
DATA_DIR = Path(os.getenv("TANDADJ_DATA_DIR", str(BASE_DIR / "data"))).expanduser()
AUDIO_EXTENSIONS = {".mp3", ".flac", ".m4a", ".wav", ".ogg", ".aiff"}

# API
API_HOST = os.getenv("TANDADJ_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("TANDADJ_API_PORT", "8000"))
# Origin of the separately served web UI; empty allows any origin
TANDADJ_WEB_ORIGIN = os.getenv("TANDADJ_WEB_ORIGIN", "")

# Planning agent (OpenAI); no key means the fallback planner is always used
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4.1-mini")
AGENT_TIMEOUT_SEC = float(os.getenv("TANDADJ_AGENT_TIMEOUT_SEC", "60"))


def library_file(data_dir: Path = DATA_DIR) -> Path:
    return data_dir / "library" / "library.json"


def playlists_dir(data_dir: Path = DATA_DIR) -> Path:
    return data_dir / "playlists"


def tanda_library_dir(data_dir: Path = DATA_DIR) -> Path:
    return data_dir / "tanda-library"


def ensure_data_dirs(data_dir: Path = DATA_DIR) -> None:
    library_file(data_dir).parent.mkdir(parents=True, exist_ok=True)
    playlists_dir(data_dir).mkdir(parents=True, exist_ok=True)
    tanda_library_dir(data_dir).mkdir(parents=True, exist_ok=True)
