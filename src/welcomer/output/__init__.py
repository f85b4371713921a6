"""Rich-backed rendering for non-interactive command output."""
