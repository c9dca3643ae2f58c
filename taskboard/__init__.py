"""Taskboard: personal task management API."""
