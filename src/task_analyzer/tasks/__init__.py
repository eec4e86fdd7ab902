"""
Task subsystem.

Components:
- task_models.py: value types (Task, Priority, ConflictRecord, OverlapMode)
- task_analysis.py: sorting, priority grouping, overlap detection
- task_source.py: loading tasks from JSON / bundled sample data
- task_api.py: one-call analysis returning an AnalysisReport
- task_format.py: plain-text rendering for the console
"""
