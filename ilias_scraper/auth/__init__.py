"""Authenticated clients built from stored session cookies."""