"""
API layer for the LinguaLearner backend.

Exposes the HTTP endpoints for authentication (/register, /login), the
caller's profile (/user/...) and posts with likes and comments (/posts/...).
"""
