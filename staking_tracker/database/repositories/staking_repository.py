# staking_tracker/database/repositories/staking_repository.py

from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...core.logging import log_with_context, DEBUG, WARNING, ERROR
from ..base import utc_now
from ..base_repository import BaseRepository
from ..tables import DBStaking


# Persisted lower-case
ADDRESS_FIELDS = ('token_address', 'staking_address')


def _normalize_addresses(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value.lower() if key in ADDRESS_FIELDS and value else value
            for key, value in fields.items()}


class StakingRepository(BaseRepository[DBStaking]):
    """Repository for staking records, keyed by token address"""

    def __init__(self, db_manager):
        super().__init__(db_manager, DBStaking)

    def get_all(self, session: Session) -> List[DBStaking]:
        try:
            return session.query(DBStaking).order_by(DBStaking.token_symbol).all()
        except Exception as e:
            log_with_context(self.logger, ERROR, "Error getting staking records",
                            error=str(e))
            raise

    def get_by_address(self, session: Session, token_address: str) -> Optional[DBStaking]:
        try:
            return session.query(DBStaking).filter(
                DBStaking.token_address == token_address.lower()
            ).one_or_none()
        except Exception as e:
            log_with_context(self.logger, ERROR, "Error getting staking record by address",
                            token_address=token_address,
                            error=str(e))
            raise

    def get_by_protocol_id(self, session: Session, protocol_id: str) -> List[DBStaking]:
        try:
            return session.query(DBStaking).filter(
                DBStaking.protocol_id == protocol_id
            ).order_by(DBStaking.token_symbol).all()
        except Exception as e:
            log_with_context(self.logger, ERROR, "Error getting staking records by protocol",
                            protocol_id=protocol_id,
                            error=str(e))
            raise

    def upsert(self, session: Session, token_address: str,
               create_fields: Dict[str, Any], update_fields: Dict[str, Any]) -> DBStaking:
        """
        Insert or update the record for token_address.

        create_fields are applied only when no row exists yet; update_fields
        overwrite an existing row. updated_at is stamped in both cases.
        The session must not hold other pending work: a lost insert race
        rolls it back before retrying as an update.
        """
        existing = self.get_by_address(session, token_address)

        if existing is None:
            try:
                fields = _normalize_addresses({**create_fields, 'token_address': token_address})
                fields['updated_at'] = utc_now()
                record = self.create(session, **fields)
                log_with_context(self.logger, DEBUG, "Staking record created",
                                token_address=token_address)
                return record
            except IntegrityError:
                # A concurrent writer inserted the row first; fall through to update
                session.rollback()
                log_with_context(self.logger, WARNING, "Staking record appeared during insert, updating",
                                token_address=token_address)
                existing = self.get_by_address(session, token_address)
                if existing is None:
                    raise

        for field, value in _normalize_addresses(update_fields).items():
            setattr(existing, field, value)
        existing.updated_at = utc_now()
        session.flush()

        log_with_context(self.logger, DEBUG, "Staking record updated",
                        token_address=token_address)
        return existing
