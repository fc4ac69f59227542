# ABOUTME: Drivers that run the extraction pipeline over many files.
# ABOUTME: Isolates per-file failures so one bad EPUB never aborts a batch.
