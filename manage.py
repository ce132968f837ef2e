#!/usr/bin/env python
"""
Command-line entry point for the Herdbook Django project.

Sets the default settings module and hands the arguments to Django, so
``runserver``, ``migrate``, ``test`` and the project's own
``import_bulls`` command can be run from the repository root.
"""
import os
import sys


def main() -> None:
    """Run administrative tasks."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'herdbook.settings')
    try:
        from django.core.management import execute_from_command_line  # type: ignore
    except ImportError as exc:  # pragma: no cover
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
