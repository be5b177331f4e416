"""Aggregations over analytics events for the dashboard and analytics pages.

The bucketing and counting functions are pure: they take event
rows (anything with ``event_name``, ``event_value`` and ``created_at``) and a
reference ``now`` and never touch the database. Stored timestamps are naive
UTC; ``now`` should be timezone-aware and decides which calendar day or month
an event belongs to.
``load_monthly_submissions`` and ``build_analytics_summary`` run the queries.
"""
from collections import Counter
from datetime import date, datetime, timedelta

import pytz

from models.analytics_event import AnalyticsEvent

APPLICATION_SUBMIT = 'application_form_submit'
CONTACT_SUBMIT = 'contact_form_submit'
SESSION_START = 'session_start'
RETURN_VISIT = 'return_visit'
FORM_EVENTS = (CONTACT_SUBMIT, APPLICATION_SUBMIT)

MONTHS_SHOWN = 12
TREND_DAYS = 30
RECENT_EVENT_LIMIT = 1000
RECENT_EVENTS_SHOWN = 100


def get_local_now(tz_name):
    return datetime.now(pytz.utc).astimezone(pytz.timezone(tz_name))


def _aware(moment):
    if moment.tzinfo is None:
        return pytz.utc.localize(moment)
    return moment


def _localize(naive, tz):
    if hasattr(tz, 'localize'):
        return tz.localize(naive)
    return naive.replace(tzinfo=tz)


def _utc_naive(moment):
    return _aware(moment).astimezone(pytz.utc).replace(tzinfo=None)


def _in_zone(moment, now):
    return _aware(moment).astimezone(_aware(now).tzinfo)


def _shift_month(year, month, delta):
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def _bucket_months(now):
    now = _aware(now)
    return [_shift_month(now.year, now.month, -i) for i in range(MONTHS_SHOWN - 1, -1, -1)]


def _month_label(year, month):
    return date(year, month, 1).strftime('%b %Y')


def monthly_window_start(now):
    """UTC start of the oldest month shown by ``monthly_buckets``."""
    now = _aware(now)
    year, month = _bucket_months(now)[0]
    return _utc_naive(_localize(datetime(year, month, 1), now.tzinfo))


def monthly_buckets(events, now):
    counts = Counter()
    for event in events:
        local = _in_zone(event.created_at, now)
        counts[(local.year, local.month)] += 1
    return [
        {'month': _month_label(year, month), 'count': counts[(year, month)]}
        for year, month in _bucket_months(now)
    ]


def empty_monthly_buckets(now):
    return monthly_buckets([], now)


def retention_rate(total_sessions, return_visits):
    # "0" is a display placeholder for "no sessions yet"
    if total_sessions <= 0:
        return '0'
    return f"{return_visits / total_sessions * 100:.1f}"


def count_by_value(events, name_contains):
    counts = Counter(
        e.event_value for e in events
        if name_contains in e.event_name and e.event_value is not None
    )
    return [
        {'value': value, 'label': value.replace('_', ' '), 'count': count}
        for value, count in sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    ]


def count_recent(events, names, days, now):
    cutoff = _aware(now) - timedelta(days=days)
    return sum(1 for e in events if e.event_name in names and _aware(e.created_at) >= cutoff)


def daily_counts(events, now, days=TREND_DAYS):
    today = _aware(now).date()
    counts = Counter(_in_zone(e.created_at, now).date() for e in events)
    result = []
    for i in range(days - 1, -1, -1):
        day = today - timedelta(days=i)
        result.append({'date': day.strftime('%Y-%m-%d'), 'count': counts[day]})
    return result


def load_monthly_submissions(now):
    events = AnalyticsEvent.query.filter(
        AnalyticsEvent.event_name == APPLICATION_SUBMIT,
        AnalyticsEvent.created_at >= monthly_window_start(now),
    ).order_by(AnalyticsEvent.created_at.asc()).all()
    return monthly_buckets(events, now)


def build_analytics_summary(now, window_days=7):
    """Everything the analytics page shows, as plain data."""
    def count(name):
        return AnalyticsEvent.query.filter_by(event_name=name).count()

    contact_submissions = count(CONTACT_SUBMIT)
    application_submissions = count(APPLICATION_SUBMIT)
    total_sessions = count(SESSION_START)
    return_visits = count(RETURN_VISIT)

    window_cutoff = _utc_naive(now - timedelta(days=window_days))
    recent_forms = AnalyticsEvent.query.filter(
        AnalyticsEvent.event_name.in_(FORM_EVENTS),
        AnalyticsEvent.created_at >= window_cutoff,
    ).all()

    careers_events = AnalyticsEvent.query.filter(
        AnalyticsEvent.event_name.contains('careers'),
        AnalyticsEvent.event_value.isnot(None),
    ).all()

    trend_cutoff = _utc_naive(now - timedelta(days=TREND_DAYS))
    trend_events = AnalyticsEvent.query.filter(AnalyticsEvent.created_at >= trend_cutoff).all()

    latest = AnalyticsEvent.query.order_by(AnalyticsEvent.created_at.desc()).limit(RECENT_EVENT_LIMIT).all()

    return {
        'contact_submissions': contact_submissions,
        'application_submissions': application_submissions,
        'total_sessions': total_sessions,
        'return_visits': return_visits,
        'new_sessions': max(total_sessions - return_visits, 0),
        'retention_rate': retention_rate(total_sessions, return_visits),
        'window_days': window_days,
        'recent_contact': count_recent(recent_forms, (CONTACT_SUBMIT,), window_days, now),
        'recent_applications': count_recent(recent_forms, (APPLICATION_SUBMIT,), window_days, now),
        'recent_total': count_recent(recent_forms, FORM_EVENTS, window_days, now),
        'careers_by_source': count_by_value(careers_events, 'careers'),
        'daily_trend': daily_counts(trend_events, now, TREND_DAYS),
        'recent_events': [e.to_dict() for e in latest[:RECENT_EVENTS_SHOWN]],
        'events_loaded': len(latest),
    }
