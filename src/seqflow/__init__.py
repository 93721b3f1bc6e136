"""Serial task sequencing: run sync and async steps one at a time, threading each result into the next."""

from .core.callbacks import invoke_fn
from .core.timers import AsyncioTimer, ThreadingTimer, make_timer
from .tasks.iterators import (
    exec_task_queue,
    exec_task_with_params,
    exec_tasks,
    repeat_task_until,
    repeat_task_while,
)
from .tasks.task_api import (
    get_coroutine_task,
    get_delayed_task,
    get_log_task,
    get_repeat_until_task,
    get_sleep_task,
    get_sync_task,
    get_timestamp_task,
)
from .tasks.task_models import UNSET, RunnerState
from .tasks.task_queue import consume_task_queue
from .tasks.task_runner import QueueRunner, Qr

__all__ = [
    "invoke_fn",
    "AsyncioTimer",
    "ThreadingTimer",
    "make_timer",
    "exec_task_queue",
    "exec_task_with_params",
    "exec_tasks",
    "repeat_task_until",
    "repeat_task_while",
    "consume_task_queue",
    "get_coroutine_task",
    "get_delayed_task",
    "get_log_task",
    "get_repeat_until_task",
    "get_sleep_task",
    "get_sync_task",
    "get_timestamp_task",
    "UNSET",
    "RunnerState",
    "QueueRunner",
    "Qr",
]
