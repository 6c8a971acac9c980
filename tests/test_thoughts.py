from datetime import datetime

from dailyjournal.blueprints.thoughts.helpers import format_thought_time, skill_names, to_thoughts
from dailyjournal.store import EntryRecord


def test_format_thought_time():
    assert format_thought_time(datetime(2026, 10, 16, 9, 5)) == "Oct 16, 2026, 09:05 AM"
    assert format_thought_time(datetime(2025, 1, 3, 21, 40)) == "Jan 03, 2025, 09:40 PM"


def test_to_thoughts():
    records = [EntryRecord(7, "hi", datetime(2026, 10, 16, 12, 0), [1, 3])]

    (thought,) = to_thoughts(records)
    assert thought.id == 7
    assert thought.time == "Oct 16, 2026, 12:00 PM"
    assert thought.timestamp == "2026-10-16T12:00:00Z"
    assert thought.competencies == [1, 3]


def test_skill_names_fall_back_to_id():
    assert skill_names([1, 9], {1: "Teamwork"}) == ["Teamwork", "#9"]


def test_home_shows_only_five_recent(alice):
    for i in range(7):
        alice.post("/api/entry", json={"text": f"thought number {i}", "competencyIDs": [1] if i == 6 else []})

    html = alice.get("/").get_data(as_text=True)

    assert "thought number 6" in html
    assert "thought number 2" in html
    assert "thought number 1" not in html
    assert "Competencies: </strong>Communication" in html
    assert 'title="Expressing ideas clearly."' in html


def test_home_without_thoughts(alice):
    html = alice.get("/").get_data(as_text=True)

    assert "No thoughts yet. Start typing!" in html


def test_history_lists_everything(alice):
    for i in range(7):
        alice.post("/api/entry", json={"text": f"thought number {i}", "competencyIDs": [2, 4]})

    html = alice.get("/thoughts").get_data(as_text=True)

    for i in range(7):
        assert f"thought number {i}" in html
    assert '<span class="tag">Teamwork</span>' in html
    assert '<span class="tag">Leadership</span>' in html


def test_views_require_login(client):
    for path in ("/", "/thoughts"):
        response = client.get(path)
        assert response.status_code == 302
        assert "/auth/login" in response.headers["Location"]


def test_home_thoughts_can_be_loaded_into_the_composer(alice):
    entry_id = alice.post("/api/entry", json={"text": "editable", "competencyIDs": [1, 3]}).get_json()["id"]

    html = alice.get("/").get_data(as_text=True)

    assert f'data-id="{entry_id}" data-competencies="[1, 3]"' in html
    assert 'class="edit-in-composer"' in html
    assert 'id="cancel-edit"' in html


def test_times_carry_iso_timestamp_for_local_rendering(alice):
    created = alice.post("/api/entry", json={"text": "timed", "competencyIDs": []}).get_json()

    for path in ("/", "/thoughts"):
        html = alice.get(path).get_data(as_text=True)
        assert f'<time datetime="{created["createdAt"]}">' in html
