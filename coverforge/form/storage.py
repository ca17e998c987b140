"""
Local storage for the form: a JSON snapshot of the fields and the last letter.

Storage is best effort. A failing database never breaks the form; problems are
logged and reads come back empty.
"""

import json
from typing import Optional

from loguru import logger
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ..db import db
from ..db.models import StoredValue
from .state import FormData

FORM_STORAGE_KEY = "coverLetterForm"
LETTER_STORAGE_KEY = "lastGeneratedLetter"


class LocalStore:
    def __init__(self, engine=None):
        engine = engine or db.engine
        try:
            db.init_db(engine)
        except SQLAlchemyError as e:
            logger.warning(f"[storage] Local storage unavailable: {e}")
        self._sessions = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    # raw key/value access
    def get_item(self, key: str) -> Optional[str]:
        with db.get_session(self._sessions) as s:
            row = s.get(StoredValue, key)
            return row.value if row else None

    def set_item(self, key: str, value: str) -> None:
        with db.get_session(self._sessions) as s:
            row = s.get(StoredValue, key)
            if row:
                row.value = value
            else:
                s.add(StoredValue(key=key, value=value))

    def remove_item(self, key: str) -> None:
        with db.get_session(self._sessions) as s:
            row = s.get(StoredValue, key)
            if row:
                s.delete(row)

    # form helpers
    def persist_state(self, data: FormData) -> None:
        try:
            self.set_item(FORM_STORAGE_KEY, json.dumps(data.to_dict()))
        except SQLAlchemyError as e:
            logger.warning(f"[storage] Failed to persist form state: {e}")

    def hydrate_state(self) -> Optional[FormData]:
        try:
            stored = self.get_item(FORM_STORAGE_KEY)
            return FormData.model_validate(json.loads(stored)) if stored else None
        except (SQLAlchemyError, json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"[storage] Failed to hydrate form state: {e}")
            return None

    def persist_letter(self, letter: str) -> None:
        try:
            self.set_item(LETTER_STORAGE_KEY, letter)
        except SQLAlchemyError as e:
            logger.warning(f"[storage] Failed to persist letter: {e}")

    def hydrate_letter(self) -> Optional[str]:
        try:
            return self.get_item(LETTER_STORAGE_KEY)
        except SQLAlchemyError as e:
            logger.warning(f"[storage] Failed to hydrate letter: {e}")
            return None

    def clear(self) -> None:
        try:
            self.remove_item(FORM_STORAGE_KEY)
            self.remove_item(LETTER_STORAGE_KEY)
        except SQLAlchemyError as e:
            logger.warning(f"[storage] Failed to clear local storage: {e}")
