from flask import jsonify, render_template, request, redirect, url_for
from sqlalchemy.exc import SQLAlchemyError
from models.models import db
from services.inbox_service import InvalidInput, NotFound, parse_id_list, parse_read_update, bulk_delete, set_read_state
from flask_login import current_user
import logging

logger = logging.getLogger(__name__)


def wants_json():
    return request.path.startswith('/api/')


def json_error(message, status):
    return jsonify({'error': message}), status


def unauthorized():
    if wants_json():
        return json_error('Unauthorized', 401)
    return redirect(url_for('auth.login'))


def not_found(e):
    if wants_json():
        return json_error('Not found', 404)
    return render_template('errors/404.html'), 404


def server_error(e):
    if wants_json():
        return json_error('Internal server error', 500)
    return render_template('errors/500.html'), 500


def register_error_handlers(app, login_manager):
    login_manager.unauthorized_handler(unauthorized)
    app.register_error_handler(404, not_found)
    app.register_error_handler(500, server_error)


# Shared JSON handlers for the applications and messages APIs

def list_rows(model, order, label):
    try:
        rows = model.query.order_by(order).all()
    except SQLAlchemyError:
        logger.exception('Error fetching %s', label)
        return json_error(f'Failed to fetch {label}', 500)
    return jsonify([r.to_dict() for r in rows])


def update_read_state(model, label):
    body = request.get_json(silent=True)
    try:
        record_id, is_read = parse_read_update(body)
        record = set_read_state(model, record_id, is_read)
    except InvalidInput as e:
        return json_error(str(e), 400)
    except NotFound:
        return json_error('Not found', 404)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error updating %s', label)
        return json_error(f'Failed to update {label}', 500)
    return jsonify(record.to_dict())


def delete_rows(model, label):
    body = request.get_json(silent=True)
    try:
        ids = parse_id_list(body)
    except InvalidInput as e:
        return json_error(str(e), 400)
    try:
        deleted = bulk_delete(model, ids)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error bulk deleting %s', label)
        return json_error(f'Failed to delete {label}', 500)
    logger.info('%s deleted %s %s', current_user.email, deleted, label)
    return jsonify({'success': True, 'deleted': deleted})
