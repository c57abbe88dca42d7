"""Taskbot - a text-command personal task tracker."""
