from types import SimpleNamespace

from werkzeug.datastructures import MultiDict

from models.models import Application
from services.filter_service import CGPA_RANGES, cgpa_bounds, extract_filter_options, filter_applications


def row(**kwargs):
    fields = {'job_title': None, 'specialization': '', 'year_of_grad': '', 'backlogs': ''}
    fields.update(kwargs)
    return SimpleNamespace(**fields)


def test_job_titles_deduplicated_sorted_without_empties():
    rows = [row(job_title='Intern'), row(job_title='Intern'), row(job_title=''), row(job_title='Engineer'), row()]

    assert extract_filter_options(rows)['jobTitles'] == ['Engineer', 'Intern']


def test_other_columns_are_distinct_and_sorted():
    rows = [
        row(specialization='IT', year_of_grad='2026', backlogs='1'),
        row(specialization='CSE', year_of_grad='2024', backlogs='0'),
        row(specialization='CSE ', year_of_grad='2024', backlogs='0'),
    ]

    options = extract_filter_options(rows)

    assert options['specializations'] == ['CSE', 'IT']
    assert options['years'] == ['2024', '2026']
    assert options['backlogs'] == ['0', '1']


def test_cgpa_ranges_are_static():
    assert extract_filter_options([])['cgpaRanges'] == ['7-8', '8-9', '9-10', '10+']


def test_cgpa_bounds():
    assert cgpa_bounds('8-9') == (8.0, 9.0)
    assert cgpa_bounds('10+') == (10.0, None)
    assert cgpa_bounds('5-6') is None
    assert all(cgpa_bounds(label) for label in CGPA_RANGES)


class TestFilterApplications:
    def names(self, args):
        return [a.name for a in filter_applications(Application.query, MultiDict(args)).all()]

    def test_filters_combine(self, make_application):
        make_application(name='A', email='a@x.com', cgpa=8.5, job_title='Intern', year_of_grad='2025')
        make_application(name='B', email='b@x.com', cgpa=9.2, job_title='Intern', year_of_grad='2026')
        make_application(name='C', email='c@x.com', cgpa=7.1, job_title='Engineer', year_of_grad='2025')

        assert self.names([('cgpa', '8-9')]) == ['A']
        assert sorted(self.names([('job', 'Intern')])) == ['A', 'B']
        assert sorted(self.names([('year', '2025'), ('year', '2026'), ('job', 'Intern')])) == ['A', 'B']
        assert sorted(self.names([('min_cgpa', '8')])) == ['A', 'B']

    def test_unread_and_sort(self, make_application):
        make_application(name='Zed', email='z@x.com', is_read=True)
        make_application(name='Amy', email='a@x.com')
        make_application(name='Bob', email='b@x.com')

        assert self.names([('unread', '1'), ('sort', 'name')]) == ['Amy', 'Bob']
        assert self.names([('sort', 'name')]) == ['Amy', 'Bob', 'Zed']

    def test_unknown_values_ignored(self, make_application):
        make_application(name='A', email='a@x.com')

        assert self.names([('cgpa', 'lots'), ('sort', 'sideways')]) == ['A']
