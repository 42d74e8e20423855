"""
Producer App - Queue Seeding

Responsibilities:
- Push raw pricing events from a JSONL file onto the events queue, verbatim
- Optionally push empty stop payloads, one per worker that should stop
"""
