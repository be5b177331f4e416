import logging

from sqlalchemy.exc import SQLAlchemyError

from models.models import db

logger = logging.getLogger(__name__)


class InvalidInput(ValueError):
    pass


class NotFound(LookupError):
    pass


def parse_id_list(body):
    ids = body.get('ids') if isinstance(body, dict) else None
    if not isinstance(ids, list) or any(not isinstance(i, str) for i in ids):
        raise InvalidInput('Invalid ids')
    return ids


def parse_read_update(body):
    if not isinstance(body, dict):
        raise InvalidInput('Invalid request body')
    record_id = body.get('id')
    is_read = body.get('isRead')
    if not record_id or not isinstance(record_id, str) or not isinstance(is_read, bool):
        raise InvalidInput('Invalid request body')
    return record_id, is_read


def _commit():
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise


def bulk_delete(model, ids):
    """Delete the rows of ``model`` whose id is in ``ids``; return how many went."""
    if not ids:
        return 0
    deleted = model.query.filter(model.id.in_(ids)).delete(synchronize_session=False)
    _commit()
    logger.info('Deleted %s of %s requested %s rows', deleted, len(ids), model.__tablename__)
    return deleted


def mark_read(record):
    if not record.is_read:
        record.is_read = True
        _commit()
    return record


def set_read_state(model, record_id, is_read):
    record = db.session.get(model, record_id)
    if record is None:
        raise NotFound(record_id)
    # is_read never goes back to False once set
    if is_read:
        mark_read(record)
    return record
