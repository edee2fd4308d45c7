"""Route Modules — one file per resource/concern.

Invariants:
    - Handlers are plain functions; paths and methods live in route_table.py
    - Handlers never touch module-level state (service config comes from the app)
"""
