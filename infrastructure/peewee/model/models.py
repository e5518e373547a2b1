from peewee import CharField, DateTimeField, Model, TextField

from infrastructure.peewee.session.db import db


class TaskModel(Model):
    # Texto tal cual: UUIDField normaliza a hex en minúsculas.
    id = CharField(max_length=36, primary_key=True)
    title = CharField(max_length=255)
    description = TextField()
    status = CharField(max_length=20, default="pending")
    created_at = DateTimeField(index=True)
    updated_at = DateTimeField()

    class Meta:
        database = db
        table_name = "tasks"
