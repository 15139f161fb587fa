from flask import current_app
from sqlalchemy.orm.exc import StaleDataError

from stockroom.errors import InvalidArgument, NotFound
from stockroom.extensions import db
from stockroom.schemas import MAX_INT, PageRequest, PaginatedResponse


def paginate(query, page: PageRequest, dto_cls, mapper) -> PaginatedResponse:
    result = query.paginate(page=page.page, per_page=page.page_size, error_out=False)
    items = [mapper(row) for row in result.items]
    return PaginatedResponse[dto_cls].build(items, result.total or 0, page)


def check_id(entity_id: int) -> int:
    """Reject ids the store cannot represent before they reach a query."""
    if entity_id > MAX_INT:
        raise InvalidArgument(errors=[f"Id {entity_id} is out of range"])
    return entity_id


def row_exists(model, entity_id: int) -> bool:
    return db.session.query(model.id).filter(model.id == entity_id).first() is not None


def commit_update(model, entity_id: int, not_found_message: str) -> None:
    """Commit an update guarded by the version counter.

    A conflicting write surfaces as ``StaleDataError``; if the row is gone by
    then the caller gets ``NotFound``, otherwise the conflict propagates.
    """
    try:
        db.session.commit()
    except StaleDataError:
        db.session.rollback()
        if not row_exists(model, entity_id):
            current_app.logger.warning("%s %s vanished during update", model.__name__, entity_id)
            raise NotFound(not_found_message)
        current_app.logger.error("Concurrent update conflict on %s %s", model.__name__, entity_id)
        raise
