"""Appointment booking backend for the storefront"""
