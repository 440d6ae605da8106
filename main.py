from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication
from loguru import logger

from app.viewmodels.main_vm import MainVM
from app.views.main_window import MainWindow
from core.config import LightboxConfig
from core.services.lightbox_session import LightboxSession
from infrastructure.content_repository import FallbackContentSource, JsonContentRepository
from infrastructure.logging import init_logging
from infrastructure.settings import JsonSettings

BASE_DIR = Path(__file__).parent


def build_content_source(settings: JsonSettings) -> FallbackContentSource:
    """CMS export from settings when configured, static data otherwise."""
    export_path = settings.resolve_path("content.portfolio_path")
    primary = JsonContentRepository(export_path) if export_path is not None else None
    return FallbackContentSource(primary)


def main() -> int:
    settings = JsonSettings.load_or_default(BASE_DIR / "settings.json")
    init_logging(
        settings.get("logging.directory"),
        level=str(settings.get("logging.level", "INFO")),
        console=bool(settings.get("logging.console", False)),
    )

    app = QApplication(sys.argv)

    content = build_content_source(settings)
    session = LightboxSession(config=LightboxConfig.from_settings(settings))
    vm = MainVM(content, session=session)
    vm.load_content()
    if content.used_fallback:
        logger.info("Running with built-in portfolio content")

    win = MainWindow(vm)
    win.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
