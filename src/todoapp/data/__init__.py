"""
Task data layer.

Components:
- task_models.py: data structures (Task, TasksFilter)
- task_store.py: SQLite-backed local data source
- remote.py: in-memory "remote" data source with simulated latency
- repository.py: cache + local + remote composed into one TasksDataSource
"""
