"""Django project package for Herdbook."""
