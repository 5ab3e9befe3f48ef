import pytest

from greedylab.job_scheduling import main, max_profit

SAMPLE_JOBS = [(4, 20), (1, 10), (1, 40), (1, 30)]


def _fits_schedule(selected):
    deadlines = sorted(deadline for deadline, _ in selected)
    return all(deadline >= day for day, deadline in enumerate(deadlines, start=1))


def test_sample_jobs():
    profit, selected = max_profit(SAMPLE_JOBS)
    assert profit == 60
    assert selected == [(1, 40), (4, 20)]


@pytest.mark.parametrize(
    "jobs",
    [
        SAMPLE_JOBS,
        [(2, 100), (1, 19), (2, 27), (1, 25), (3, 15)],
        [(3, 5), (3, 5), (3, 5), (3, 5)],
        [(1, 1)],
    ],
)
def test_selection_is_feasible_and_profit_matches(jobs):
    profit, selected = max_profit(jobs)
    assert profit == sum(value for _, value in selected)
    assert _fits_schedule(selected)
    remaining = list(jobs)
    for job in selected:
        remaining.remove(job)


def test_selected_are_in_descending_profit_order():
    _, selected = max_profit([(2, 100), (1, 19), (2, 27), (1, 25), (3, 15)])
    values = [value for _, value in selected]
    assert values == sorted(values, reverse=True)


def test_no_jobs():
    assert max_profit([]) == (0, [])


def test_non_positive_deadlines_are_never_scheduled():
    profit, selected = max_profit([(0, 50), (-2, 70), (1, 5)])
    assert selected == [(1, 5)]
    assert profit == 5


def test_input_is_left_unchanged():
    jobs = list(SAMPLE_JOBS)
    max_profit(jobs)
    assert jobs == SAMPLE_JOBS


def test_main_prints_schedule(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    profit, selected = max_profit(SAMPLE_JOBS)
    assert out.startswith("Selected Jobs (deadline, profit): ")
    assert f"Max Profit = {profit}" in out
    assert all(f"({d},{p})" in out for d, p in selected)