"""Jinja2-backed templates with string helper functions."""