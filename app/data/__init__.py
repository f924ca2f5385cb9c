"""
Content access layer.

Design rules:
- Views call ONLY functions/constants in this package.
- The blog fetch is wrapped so a failure degrades to an inline error, never a crash.
- No env var reads here (config-only).
"""
