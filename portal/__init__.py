"""
SpaceTechHub Careers Portal
Job-application portal backend.

Architecture:
- FastAPI routes: applications and About Us
- Storage backends: in-memory, key-value blobs (MongoDB), relational (PostgreSQL)
- Resumes travel and rest as base64 text
"""

__version__ = "1.0.0"
