"""
Application context.

Everything a request needs beyond its own database session is built once
per application and stored on ``app.state.context``.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from hostel_leave.config.settings import Settings
from hostel_leave.core.security import PasswordManager, TokenManager
from hostel_leave.db.session import create_db_engine, create_session_factory
from hostel_leave.services.document_service import DocumentGenerator


@dataclass
class AppContext:
    settings: Settings
    engine: Engine
    session_factory: sessionmaker
    password_manager: PasswordManager
    token_manager: TokenManager
    document_generator: DocumentGenerator

    @classmethod
    def from_settings(cls, settings: Settings, engine: Optional[Engine] = None) -> "AppContext":
        engine = engine or create_db_engine(settings)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=create_session_factory(engine),
            password_manager=PasswordManager(rounds=settings.PASSWORD_BCRYPT_ROUNDS),
            token_manager=TokenManager.from_settings(settings),
            document_generator=DocumentGenerator(
                output_dir=settings.get_pdf_dir(),
                url_prefix=settings.get_pdf_url_prefix(),
                tz_name=settings.TIMEZONE,
                app_name=settings.APP_NAME,
            ),
        )

    def dispose(self) -> None:
        self.engine.dispose()
