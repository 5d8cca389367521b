"""Files API: CRUD over the files of a single local storage directory."""
