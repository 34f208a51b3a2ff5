"""Query Nest backend"""
