"""
prereg - pre-registration site.

Registration endpoint with confirmation/admin emails, plus the client-side
state layer (persisted record stores, notification banner, submission
workflow, admin dashboard view-model).
"""

__version__ = "0.1.0"
