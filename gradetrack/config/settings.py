from dataclasses import dataclass, field
import os
from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    web_mode: bool = field(default_factory=lambda: _env_flag("GRADETRACK_WEB"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8550")))
    log_level: str = field(default_factory=lambda: os.getenv("GRADETRACK_LOG_LEVEL", "INFO").upper())
    semester_label: str = field(default_factory=lambda: os.getenv("GRADETRACK_SEMESTER_LABEL", "Semester 5"))

    @classmethod
    def from_env(cls) -> "Settings":
        return cls()


settings = Settings()
