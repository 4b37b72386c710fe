"""gradetracker — Student grade tracker.

Keeps a record per student (name, age, scores), appends scores, and reports
each student's average to two decimal places.

Usage:
    python -m gradetracker            # Run the demo transcript
    python -m gradetracker demo       # Same, explicitly
    python -m gradetracker summary    # Sample roster as a table
"""
