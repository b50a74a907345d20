"""API blueprints"""
