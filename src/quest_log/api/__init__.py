"""
Reference Task API for the quest log.

Build an app with `quest_log.api.main.create_app()`; the module-level
`quest_log.api.main.app` uses settings from the environment.
"""
