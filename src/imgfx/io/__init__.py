"""Image acquisition, caption overlay and preset files."""
