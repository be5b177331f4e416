from flask import Blueprint, render_template, request, jsonify, current_app, url_for
from flask_login import login_required
from sqlalchemy.exc import SQLAlchemyError
from models.models import Application
from services.filter_service import filter_applications, extract_filter_options, CGPA_RANGES
from services.inbox_service import mark_read
from services.export_service import export_applications_csv
from services.analytics_service import get_local_now
from routes.common import json_error, list_rows, update_read_state, delete_rows
import logging

logger = logging.getLogger(__name__)

applications_bp = Blueprint('applications', __name__)


def export_url():
    url = url_for('applications.export_applications')
    query = request.query_string.decode()
    return f"{url}?{query}" if query else url


@applications_bp.route('/applications')
@login_required
def applications():
    rows = filter_applications(Application.query, request.args).all()
    unread_count = Application.query.filter_by(is_read=False).count()
    filter_options = extract_filter_options(Application.query.all())
    return render_template(
        'applications.html',
        applications=rows,
        unread_count=unread_count,
        filter_options=filter_options,
        cgpa_ranges=CGPA_RANGES,
        selected_jobs=request.args.getlist('job'),
        selected_years=request.args.getlist('year'),
        selected_cgpa=request.args.get('cgpa', ''),
        min_cgpa=request.args.get('min_cgpa', ''),
        unread_only=request.args.get('unread', ''),
        sort=request.args.get('sort', 'newest'),
        export_url=export_url(),
    )


@applications_bp.route('/applications/export.csv')
@login_required
def export_applications():
    rows = filter_applications(Application.query, request.args).all()
    today = get_local_now(current_app.config['DASHBOARD_TIMEZONE']).date()
    return export_applications_csv(rows, today)


@applications_bp.route('/applications/<string:application_id>')
@login_required
def application_detail(application_id):
    application = Application.query.get_or_404(application_id)
    mark_read(application)
    return render_template('application_detail.html', application=application)


@applications_bp.route('/api/applications', methods=['GET'])
@login_required
def list_applications():
    return list_rows(Application, Application.uploaded_at.desc(), 'applications')


@applications_bp.route('/api/applications', methods=['PATCH'])
@login_required
def update_application():
    return update_read_state(Application, 'application')


@applications_bp.route('/api/applications/bulk-delete', methods=['POST'])
@login_required
def bulk_delete_applications():
    return delete_rows(Application, 'applications')


@applications_bp.route('/api/applications/filters', methods=['GET'])
@login_required
def application_filters():
    try:
        rows = Application.query.with_entities(
            Application.job_title,
            Application.specialization,
            Application.year_of_grad,
            Application.backlogs,
        ).all()
    except SQLAlchemyError:
        logger.exception('Error fetching filter options')
        return json_error('Failed to fetch filter options', 500)
    return jsonify(extract_filter_options(rows))
