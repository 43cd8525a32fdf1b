"""Tell-Don't-Ask: move decisions next to the state they depend on."""
