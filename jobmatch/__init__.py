"""
Job Match Assistant.

Core components:
- api: FastAPI proxy in front of the model service and the resume store
- agents: Prompts and model calls (analysis, description fetch, search)
- client: Job collection, resume store client, API client
- db: Saved resume persistence
"""
