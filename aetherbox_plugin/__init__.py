"""Host-side glue for the AetherBox plugin: config, images, commands, lifecycle."""
