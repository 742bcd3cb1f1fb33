# taskboard

taskboard keeps users, tasks, task statuses and user-task assignments in a
SQLite database. It has create, read, update and delete operations for
tasks, statuses and assignments, a set of queries for users, and a command
that lists the stored users.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Configuration

The database location comes from the `DATABASE_URL` environment variable.
It may also be set in a `.env` file in the working directory, which
`taskboard.db.database_url` loads into the environment before reading the
variable:

```
DATABASE_URL=tasks.db
```

If `DATABASE_URL` is not set, `database_url` raises
`taskboard.db.ConfigurationError`.

`taskboard.db.establish_connection(url=None)` opens the SQLite database at
`url`, or at `DATABASE_URL` when no `url` is given, and prints the location
it connects to. A location starting with `file:` is opened as an SQLite URI.
If the database cannot be opened, it raises `ConnectionError`.

## Creating the tables

`taskboard.schema.create_schema(conn)` creates the `task_statuses`, `tasks`,
`user_tasks` and `users` tables where they do not yet exist.
`taskboard.schema.table_names()` returns the names of those four tables.

## Listing users

```
taskboard-show-users
```

The same command can be run as `python -m taskboard.show_users`. It connects
to the configured database and prints up to five users, in id order, with the
name, e-mail address and active flag of each, between separator lines. It
exits with status 1 and a message on standard error when `DATABASE_URL` is
not set, when the database cannot be opened, or when the users cannot be
read (for example, because the `users` table does not exist).

`taskboard.show_users.format_users(users)` returns that listing as a string.

## Using the library

```python
from taskboard.db import establish_connection
from taskboard.schema import create_schema
from taskboard.models import NewUser, Task, TaskStatus
from taskboard.operations import TaskOperations, TaskStatusOperations
from taskboard.users import (
    delete_users_by_name,
    find_user_by_name,
    insert_user,
    load_users,
    set_active_by_name,
)

conn = establish_connection("tasks.db")
create_schema(conn)

TaskStatusOperations(conn).create(TaskStatus(id=0, name="In Progress"))

tasks = TaskOperations(conn)
task_id = tasks.create(Task(id=0, title="Write report", description="Quarterly numbers", status_id=1))
for task in tasks.read_all():
    print(task)

tasks.update(task_id, Task(id=task_id, title="Write final report", description=None, status_id=1))
tasks.delete(task_id)

insert_user(conn, NewUser(name="David", email="david@example.com", active=True))
set_active_by_name(conn, "David", False)
print(find_user_by_name(conn, "David"))
print(load_users(conn, 10))
delete_users_by_name(conn, "David")
```

### Tasks, statuses and assignments

`taskboard.operations` has `TaskOperations`, `TaskStatusOperations` and
`UserTaskOperations`, each built on `CrudOperations` and constructed with a
connection:

- `create(item)` inserts the item, ignoring its `id`, and returns the new id.
- `read_all()` returns every row, in id order, as `Task`, `TaskStatus` or
  `UserTask` values.
- `update(item_id, data)` changes the row with that id and returns the number
  of rows changed. For a task only the title is changed; for a status, its
  name; for an assignment, both the user id and the task id.
- `delete(item_id)` removes the row and returns the number of rows removed.
- `print_all(out=None)` writes every row, one per line, to `out`, or to
  standard output.

The `New...` classes in `taskboard.models` (`NewTask`, `NewTaskStatus`,
`NewUserTask`) carry the same fields without an id and can be passed to
`create` as well.

### Users

`taskboard.users` works on the `users` table:

- `insert_user(conn, new_user)` inserts a `NewUser` and returns its id.
- `load_users(conn, limit=None)` returns users in id order, at most `limit`.
- `set_active_by_name(conn, name, active)` sets the active flag of every user
  with that name and returns the number changed.
- `find_user_by_name(conn, name)` returns the first user with that name, or
  raises `LookupError`.
- `delete_users_by_name(conn, name)` deletes every user with that name and
  returns the number removed.

## What taskboard does not do

The only command is `taskboard-show-users`, which reads users. Adding,
changing or removing records, and creating the tables, are done from Python
through the functions above. The tables carry no foreign keys, so a task's
`status_id` and an assignment's `user_id` and `task_id` are not checked
against the rows they refer to.