"""Components — kinds, one-time loading, and the name-keyed instance cache.

Controllers, models, libraries, helpers and vendor components are plain
classes found by file name under the application directory.
"""
