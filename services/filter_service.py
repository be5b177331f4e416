from models.models import Application, ContactMessage

# Display buckets offered by the CGPA filter, independent of the data
CGPA_RANGES = ['7-8', '8-9', '9-10', '10+']

APPLICATION_SORTS = {
    'newest': Application.uploaded_at.desc(),
    'oldest': Application.uploaded_at.asc(),
    'name': Application.name.asc(),
    'cgpa': Application.cgpa.desc(),
}

MESSAGE_SORTS = {
    'newest': ContactMessage.created_at.desc(),
    'oldest': ContactMessage.created_at.asc(),
    'name': ContactMessage.name.asc(),
}


def distinct_values(values):
    unique = set()
    for value in values:
        if value is None:
            continue
        value = str(value).strip()
        if value:
            unique.add(value)
    return sorted(unique)


def extract_filter_options(applications):
    return {
        'jobTitles': distinct_values(a.job_title for a in applications),
        'specializations': distinct_values(a.specialization for a in applications),
        'years': distinct_values(a.year_of_grad for a in applications),
        'backlogs': distinct_values(a.backlogs for a in applications),
        'cgpaRanges': list(CGPA_RANGES),
    }


def cgpa_bounds(label):
    """Return (low, high) for a CGPA range label; high is None when open."""
    if label not in CGPA_RANGES:
        return None
    if label.endswith('+'):
        return float(label[:-1]), None
    low, high = label.split('-')
    return float(low), float(high)


def _flag(args, name):
    return args.get(name, '').lower() in ('1', 'true', 'yes', 'on')


def filter_applications(query, args):
    jobs = [j.strip() for j in args.getlist('job') if j.strip()]
    if jobs:
        query = query.filter(Application.job_title.in_(jobs))
    years = [y.strip() for y in args.getlist('year') if y.strip()]
    if years:
        query = query.filter(Application.year_of_grad.in_(years))
    bounds = cgpa_bounds(args.get('cgpa', ''))
    if bounds:
        low, high = bounds
        query = query.filter(Application.cgpa >= low)
        if high is not None:
            query = query.filter(Application.cgpa < high)
    min_cgpa = args.get('min_cgpa', type=float)
    if min_cgpa is not None:
        query = query.filter(Application.cgpa >= min_cgpa)
    if _flag(args, 'unread'):
        query = query.filter(Application.is_read.is_(False))
    order = APPLICATION_SORTS.get(args.get('sort', 'newest'), APPLICATION_SORTS['newest'])
    return query.order_by(order)


def filter_messages(query, args):
    if _flag(args, 'unread'):
        query = query.filter(ContactMessage.is_read.is_(False))
    order = MESSAGE_SORTS.get(args.get('sort', 'newest'), MESSAGE_SORTS['newest'])
    return query.order_by(order)
