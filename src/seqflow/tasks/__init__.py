"""
Task subsystem.

Components:
- task_models.py: constants, the UNSET marker and RunnerState
- iterators.py: fixed-length iterators (params, task list, repeat until/while)
- task_queue.py: destructive FIFO drainer that tolerates appends during a drain
- task_runner.py: QueueRunner, the stateful fluent chain built on the drainer
- task_api.py: task factories (sync, print, timestamp, delay, repeat, coroutine)
"""
