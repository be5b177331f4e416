import pandas as pd
from flask import send_file
import io

APPLICATION_COLUMNS = {
    'Name': 'name',
    'Email': 'email',
    'WhatsApp': 'whatsapp',
    'College': 'college',
    'Specialization': 'specialization',
    'Year of Graduation': 'year_of_grad',
    'CGPA': 'cgpa',
    'Backlogs': 'backlogs',
    'Job Title': 'job_title',
    'Resume': 'resume_url',
    'Submitted At': 'uploaded_at',
    'Read': 'is_read',
}


def applications_to_csv(applications):
    df = pd.DataFrame(
        [{label: getattr(a, attr) for label, attr in APPLICATION_COLUMNS.items()} for a in applications],
        columns=list(APPLICATION_COLUMNS),
    )
    csv_io = io.StringIO()
    df.to_csv(csv_io, index=False)
    return csv_io.getvalue()


def export_applications_csv(applications, date):
    csv_text = applications_to_csv(applications)
    return send_file(io.BytesIO(csv_text.encode()), mimetype='text/csv', as_attachment=True, download_name=f'applications_{date}.csv')
