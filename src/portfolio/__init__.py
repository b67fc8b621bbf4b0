"""Personal portfolio site: procedure API, persistence and rendered page."""
