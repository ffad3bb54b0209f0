# WORKFLOW: Conversion pipeline package for trade documents.
# Used by: ConversionService, API routers, scripts
# Modules include:
# 1. header_mapper.py - Map file headers to canonical schema fields (exact, then fuzzy)
# 2. parsers.py - Read spreadsheets, delimited and fixed-width text into records
# 3. detector.py - Infer the document type from file content
# 4. transform.py - Normalize HTS codes, countries, units, indicators and dates
# 5. validators.py - Integrity checks and business rules
# 6. serializer.py - Render fixed-width txt or delimited csv output
#
# Pipeline flow: bytes -> Detect -> Parse -> Transform -> Validate -> Serialize -> output + error report

"""
Conversion pipeline package for trade document ingestion and export.
"""
