import pytest

from core.errors import TransmissionError
from scenarios.publisher import publish_section, summarize
from scenarios.section_loader import build_section
from tests.utils.helpers import header_rows, make_row


class RecordingSender:
    def __init__(self, failing_ids=()):
        self.failing_ids = set(failing_ids)
        self.sent = []

    def send(self, activity):
        self.sent.append(activity.id)
        if activity.id in self.failing_ids:
            raise TransmissionError(f"HTTP 503 pour {activity.id}", status_code=503,
                                    activity_id=activity.id)
        return "ok"


def _section():
    return build_section(header_rows() + [make_row("A"), make_row("B")])


def test_publishes_all_groups_in_sheet_order():
    sender = RecordingSender()
    pauses = []

    results = publish_section(_section(), sender, delay=1.0, sleep=pauses.append)

    assert sender.sent == [
        "A-warm_up", "B-warm_up",
        "A-exercise_1", "B-exercise_1",
        "A-exercise_2", "B-exercise_2",
        "A-final_part", "B-final_part",
    ]
    assert all(r.success for r in results)
    # Pas de pause après le dernier envoi
    assert pauses == [1.0] * 7


def test_failure_does_not_stop_remaining_sends():
    sender = RecordingSender(failing_ids={"A-exercise_1"})

    results = publish_section(_section(), sender, groups=["exercise_1"], delay=0)

    assert sender.sent == ["A-exercise_1", "B-exercise_1"]
    assert [r.status for r in results] == ["error", "ok"]
    assert results[0].data == {"id": "A-exercise_1", "status_code": 503}
    assert results[0].source == "exercise_1"
    assert summarize(results) == {"total": 2, "sent": 1, "failed": 1}


def test_unknown_group_rejected():
    with pytest.raises(ValueError):
        publish_section(_section(), RecordingSender(), groups=["cool_down"], delay=0)
