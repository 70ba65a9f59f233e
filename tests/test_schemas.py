import pytest
from pydantic import ValidationError

from quest_log.schemas import Priority, Task, TaskCreate, TaskList, TaskUpdate


class TestPriority:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("legendary", Priority.LEGENDARY),
            ("Epic", Priority.EPIC),
            (" rare ", Priority.RARE),
            (Priority.RARE, Priority.RARE),
            ("mythic", Priority.COMMON),
            ("", Priority.COMMON),
            (None, Priority.COMMON),
            (3, Priority.COMMON),
        ],
    )
    def test_parse(self, raw, expected):
        assert Priority.parse(raw) is expected

    def test_labels(self):
        assert [p.label for p in Priority] == ["Common", "Rare", "Epic", "Legendary"]


class TestTask:
    def test_defaults_when_fields_absent(self):
        task = Task.model_validate({"id": "1", "title": "Bare"})
        assert task.description == ""
        assert task.priority is Priority.COMMON
        assert task.completed is False

    def test_nulls_and_unknown_priority_are_normalized(self):
        task = Task.model_validate(
            {"id": 7, "title": "Loose", "description": None, "priority": "ultra", "completed": None}
        )
        assert task.id == "7"
        assert task.description == ""
        assert task.priority is Priority.COMMON
        assert task.completed is False

    def test_missing_id_is_rejected(self):
        with pytest.raises(ValidationError):
            Task.model_validate({"title": "No id"})

    def test_list_envelope(self):
        assert TaskList.model_validate({}).tasks == []
        assert TaskList.model_validate({"tasks": None}).tasks == []
        assert [t.id for t in TaskList.model_validate({"tasks": [{"id": "1", "title": "a"}]}).tasks] == ["1"]


class TestTaskCreateUpdate:
    def test_create_strips_title(self):
        assert TaskCreate(title="  Go  ").title == "Go"

    @pytest.mark.parametrize("title", ["", "   ", "x" * 201])
    def test_create_rejects_bad_title(self, title):
        with pytest.raises(ValidationError):
            TaskCreate(title=title)

    def test_create_rejects_unknown_priority(self):
        with pytest.raises(ValidationError):
            TaskCreate(title="Go", priority="mythic")

    def test_update_is_partial(self):
        update = TaskUpdate(completed=True)
        assert update.model_fields_set == {"completed"}
        assert update.title is None and update.priority is None
