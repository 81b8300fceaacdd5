# grillo

grillo is a small command-line task manager. It keeps your tasks in a SQLite
database named `tasks.db`, which it opens in the current directory and
creates there if it does not exist yet.

## Installation

```
pip install .
```

## Usage

```
grillo add "Write the quarterly report"
grillo ls
grillo done 3 4
grillo del 2
grillo
grillo --version
```

| Command             | What it does                                        |
|---------------------|-----------------------------------------------------|
| `add <description>` | Add a new active task scheduled for today (UTC)     |
| `ls`                | List all tasks, by scheduled date and then by ID    |
| `done [id...]`      | Mark tasks as done                                  |
| `del [id...]`       | Delete tasks                                        |
| *(no command)*      | Show a short help text                              |
| `-V`, `--version`   | Print the version                                   |

If you run `done` or `del` with no IDs, grillo shows a table of the tasks you
can pick from (for `done`, only the active ones) and asks for IDs on one line,
separated by spaces. Words that are not task IDs are ignored. IDs given on the
command line must be non-negative whole numbers.

The first time grillo creates `tasks.db`, it adds five sample tasks so the
list is not empty.

An example listing:

```
ID     ✓  Description                    Scheduled
--------------------------------------------------
3      ✓  Fix bug in parser              2024-05-01
1      ○  Review project proposal        2024-05-02
```

`○` marks an active task and `✓` marks a task that is done.

## Using it from Python

- `grillo.db.Database(path)` opens or creates a task store; it can be used as
  a context manager and has `save_task`, `get_all_tasks`, `complete_task`,
  `delete_task`, `insert_sample_data` and `close`.
- `grillo.task.Task` is a dataclass with `id`, `description`, `created`,
  `scheduled`, `deadline`, `status`, `project` and `context`;
  `grillo.task.TaskStatus` is `ACTIVE` or `DONE`.
- `grillo.parser.parse_args(argv)` turns arguments into one of `Add`,
  `ListTasks`, `Delete`, `Done` or `Help`.
- `grillo.cli.run(command, db, stdin, stdout)` carries out such a command, and
  `grillo.cli.format_table(tasks)` renders the task table.

## What grillo does not do

Tasks carry deadline, project and context fields, but no command sets or
shows them, and there is no command to edit a task's description or
scheduled date. The database location is always `tasks.db` in the current
directory.

## Development

```
pip install -e ".[test]"
pytest
```