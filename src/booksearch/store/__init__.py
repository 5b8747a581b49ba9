"""User document store: the ``users`` table and its embedded books."""
