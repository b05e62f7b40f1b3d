"""
Business catalog.

Responsibilities:
- Read the static business dataset from disk.
- Validate it into immutable Business records.
- Hold the loaded catalog for the lifetime of the process.
"""
