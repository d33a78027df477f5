"""
External APIs integration package.

This package contains clients for external API services.
"""

from .course_client import CourseLookupClient, ServiceResolver, StaticServiceResolver

__all__ = ['CourseLookupClient', 'ServiceResolver', 'StaticServiceResolver']
