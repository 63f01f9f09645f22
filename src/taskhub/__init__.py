"""TaskHub - user and task management backend."""
