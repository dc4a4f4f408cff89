"""Key/value state such as the active debt profile pointer."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from sqlmodel import Session

from ...logging_config import get_logger
from ...models.settings import AppSetting

logger = get_logger(__name__)


class SQLModelSettingsRepository:
    """Settings stored one row per key in ``app_setting``."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[AppSetting]:
        with self.session_factory() as session:
            return session.get(AppSetting, key)

    def set(self, key: str, value: str, description: str | None = None) -> AppSetting:
        """Upsert ``key``; an omitted description keeps the stored one."""
        with self.session_factory() as session:
            setting = session.get(AppSetting, key)
            created = setting is None
            if created:
                setting = AppSetting(key=key, value=value, description=description)
            else:
                setting.value = value
                setting.updated_at = datetime.now(timezone.utc)
                if description is not None:
                    setting.description = description
            session.add(setting)
            session.commit()
            session.refresh(setting)
            logger.info(
                "Stored setting",
                extra={"setting_key": key, "inserted": created},
            )
            return setting

    def delete(self, key: str) -> bool:
        """Remove ``key``; returns whether a row existed."""
        with self.session_factory() as session:
            setting = session.get(AppSetting, key)
            if setting is None:
                return False
            session.delete(setting)
            session.commit()
        logger.info("Removed setting", extra={"setting_key": key})
        return True


__all__ = ["SQLModelSettingsRepository"]
