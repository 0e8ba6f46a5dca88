# Cache keys shared by the backend services.
#
# Only the unfiltered recipe list is cached, as one blob under one key.
# Caching filtered queries would need a key per query shape.

RECIPES_CACHE_KEY = "recipes"
