"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- threads/       → list_threads, get_thread
- messages/      → list_messages
- notifications/ → list_notifications, get_unread_count
- admin/         → list_all_threads, get_any_thread
"""
