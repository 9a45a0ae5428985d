"""Format handlers for Standard MIDI Files."""
