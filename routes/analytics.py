from flask import Blueprint, render_template, request, jsonify, current_app
from flask_login import login_required
from sqlalchemy.exc import SQLAlchemyError
from services.analytics_service import get_local_now, build_analytics_summary
from routes.common import json_error
import plotly.graph_objs as go
import plotly
import json
import logging

logger = logging.getLogger(__name__)

analytics_bp = Blueprint('analytics', __name__)

WINDOW_OPTIONS = (7, 30)


def selected_window():
    window = request.args.get('window', 7, type=int)
    return window if window in WINDOW_OPTIONS else 7


def trend_chart_json(daily_trend):
    trace = go.Scatter(
        x=[d['date'] for d in daily_trend],
        y=[d['count'] for d in daily_trend],
        mode='lines+markers',
        name='Events',
        line={'color': '#66C2E2'},
    )
    layout = go.Layout(xaxis={'title': 'Date'}, yaxis={'title': 'Events'}, title='Events per Day (Last 30 Days)')
    return json.dumps({'data': [trace], 'layout': layout}, cls=plotly.utils.PlotlyJSONEncoder)


@analytics_bp.route('/analytics')
@login_required
def analytics():
    now = get_local_now(current_app.config['DASHBOARD_TIMEZONE'])
    try:
        summary = build_analytics_summary(now, selected_window())
    except SQLAlchemyError:
        logger.exception('Error building analytics page')
        return render_template('errors/500.html'), 500
    return render_template(
        'analytics.html',
        summary=summary,
        window_options=WINDOW_OPTIONS,
        graphJSON=trend_chart_json(summary['daily_trend']),
    )


@analytics_bp.route('/api/analytics', methods=['GET'])
@login_required
def analytics_summary():
    now = get_local_now(current_app.config['DASHBOARD_TIMEZONE'])
    try:
        summary = build_analytics_summary(now, selected_window())
    except SQLAlchemyError:
        logger.exception('Error building analytics summary')
        return json_error('Failed to fetch analytics', 500)
    return jsonify(summary)
