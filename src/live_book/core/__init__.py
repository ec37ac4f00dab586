"""Pure narrative logic: choice menus, routing, and passage templates."""
