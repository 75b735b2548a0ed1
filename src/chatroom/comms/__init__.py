"""Message routing: the room, its transcript records and output sinks."""
