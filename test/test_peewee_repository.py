import os
import unittest
from uuid import uuid4

os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from fakes import ManualClock
from core.domain.errors import ValidationError
from core.domain.models.task import Task
from core.domain.models.task_description import TaskDescription
from core.domain.models.task_id import TaskId
from core.domain.models.task_status import TaskStatus
from core.domain.models.task_title import TaskTitle
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository
from infrastructure.peewee.session.db import db


class PeeweeTaskRepositoryTests(unittest.TestCase):
    def setUp(self) -> None:
        if db.is_closed():
            db.connect()
        db.create_tables([TaskModel], safe=True)
        TaskModel.delete().execute()
        self.repo = PeeweeTaskRepository()
        self.clock = ManualClock()

    def tearDown(self) -> None:
        db.drop_tables([TaskModel])
        db.close()

    def _make_task(self, title: str = "Tarea Peewee") -> Task:
        return Task.create(
            TaskTitle.create(title),
            TaskDescription.create("desc"),
            TaskId.from_string(str(uuid4())),
            clock=self.clock,
        )

    def test_save_and_find_by_id(self) -> None:
        task = self._make_task()
        self.clock.advance(30)
        task.mark_as_in_progress()

        self.repo.save(task)
        loaded = self.repo.find_by_id(task.id)

        self.assertIsNotNone(loaded)
        assert loaded is not None
        self.assertEqual(loaded.to_wire_view(), task.to_wire_view())

    def test_save_is_upsert(self) -> None:
        task = self._make_task()
        self.repo.save(task)

        task.update_title("Renombrada")
        self.repo.save(task)

        tasks = self.repo.find_all()
        self.assertEqual(len(tasks), 1)
        self.assertEqual(tasks[0].title.value, "Renombrada")

    def test_uppercase_id_keeps_its_case(self) -> None:
        raw_id = str(uuid4()).upper()
        task = Task.create(
            TaskTitle.create("Mayúsculas"),
            TaskDescription.create("desc"),
            TaskId.from_string(raw_id),
            clock=self.clock,
        )

        self.repo.save(task)
        loaded = self.repo.find_by_id(task.id)

        assert loaded is not None
        self.assertEqual(loaded.id.value, raw_id)
        self.assertEqual(loaded, task)
        self.assertEqual([t.id.value for t in self.repo.find_all()], [raw_id])

    def test_find_by_id_absent(self) -> None:
        self.assertIsNone(self.repo.find_by_id(TaskId.from_string(str(uuid4()))))

    def test_find_all_ordered_by_created_at(self) -> None:
        first = self._make_task("primera")
        self.clock.advance()
        second = self._make_task("segunda")

        self.repo.save(second)
        self.repo.save(first)

        self.assertEqual(
            [t.title.value for t in self.repo.find_all()], ["primera", "segunda"]
        )

    def test_delete(self) -> None:
        task = self._make_task("Eliminar Peewee")
        self.repo.save(task)

        self.repo.delete(task.id)
        self.repo.delete(task.id)

        self.assertIsNone(self.repo.find_by_id(task.id))

    def test_update(self) -> None:
        task = self._make_task()
        self.repo.save(task)

        updated = self.repo.update(task.id, {"description": " nueva ", "status": "completed"})

        assert updated is not None
        self.assertEqual(updated.description.value, "nueva")
        self.assertEqual(updated.status, TaskStatus.COMPLETED)
        self.assertEqual(updated.created_at, task.created_at)
        self.assertGreater(updated.updated_at, task.updated_at)
        self.assertEqual(self.repo.find_by_id(task.id).status, TaskStatus.COMPLETED)

    def test_update_absent_and_invalid(self) -> None:
        self.assertIsNone(
            self.repo.update(TaskId.from_string(str(uuid4())), {"title": "x"})
        )
        task = self._make_task()
        self.repo.save(task)
        with self.assertRaises(ValidationError):
            self.repo.update(task.id, {"title": "   "})

    def test_ping(self) -> None:
        self.assertTrue(self.repo.ping())


if __name__ == "__main__":
    unittest.main()
