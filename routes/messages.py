from flask import Blueprint, render_template, request
from flask_login import login_required
from models.models import ContactMessage
from services.filter_service import filter_messages
from services.inbox_service import mark_read
from routes.common import list_rows, update_read_state, delete_rows

messages_bp = Blueprint('messages', __name__)


@messages_bp.route('/messages')
@login_required
def messages():
    rows = filter_messages(ContactMessage.query, request.args).all()
    unread_count = ContactMessage.query.filter_by(is_read=False).count()
    return render_template(
        'messages.html',
        messages=rows,
        unread_count=unread_count,
        unread_only=request.args.get('unread', ''),
        sort=request.args.get('sort', 'newest'),
    )


@messages_bp.route('/messages/<string:message_id>')
@login_required
def message_detail(message_id):
    message = ContactMessage.query.get_or_404(message_id)
    mark_read(message)
    return render_template('message_detail.html', message=message)


@messages_bp.route('/api/messages', methods=['GET'])
@login_required
def list_messages():
    return list_rows(ContactMessage, ContactMessage.created_at.desc(), 'messages')


@messages_bp.route('/api/messages', methods=['PATCH'])
@login_required
def update_message():
    return update_read_state(ContactMessage, 'message')


@messages_bp.route('/api/messages/bulk-delete', methods=['POST'])
@login_required
def bulk_delete_messages():
    return delete_rows(ContactMessage, 'messages')
