from flask import Blueprint, render_template, current_app
from flask_login import login_required
from sqlalchemy.exc import SQLAlchemyError
from models.models import db, Application, ContactMessage
from services.analytics_service import get_local_now, load_monthly_submissions, empty_monthly_buckets
import plotly.graph_objs as go
import plotly
import json
import logging

logger = logging.getLogger(__name__)

dashboard_bp = Blueprint('dashboard', __name__)


def monthly_chart_json(monthly_data):
    trace = go.Bar(
        x=[m['month'] for m in monthly_data],
        y=[m['count'] for m in monthly_data],
        name='Applications',
        marker={'color': '#005C89'},
    )
    layout = go.Layout(xaxis={'title': 'Month'}, yaxis={'title': 'Submissions'}, title='Monthly Application Submissions')
    return json.dumps({'data': [trace], 'layout': layout}, cls=plotly.utils.PlotlyJSONEncoder)


@dashboard_bp.route('/')
@login_required
def dashboard():
    now = get_local_now(current_app.config['DASHBOARD_TIMEZONE'])
    unread_applications = Application.query.filter_by(is_read=False).count()
    unread_messages = ContactMessage.query.filter_by(is_read=False).count()
    total_applications = Application.query.count()
    total_messages = ContactMessage.query.count()

    analytics_unavailable = False
    try:
        monthly_data = load_monthly_submissions(now)
    except SQLAlchemyError:
        db.session.rollback()
        logger.warning('Analytics events not available, showing empty chart', exc_info=True)
        monthly_data = empty_monthly_buckets(now)
        analytics_unavailable = True

    return render_template(
        'dashboard.html',
        unread_applications=unread_applications,
        unread_messages=unread_messages,
        total_applications=total_applications,
        total_messages=total_messages,
        monthly_data=monthly_data,
        graphJSON=monthly_chart_json(monthly_data),
        analytics_unavailable=analytics_unavailable,
    )
