"""Appointment domain - booking, status changes and removal of appointments"""
