"""Fixed query templates for the three Raffia lookup backends.

Values are inserted literally: the downstream tools expect raw URLs and raw byte-literal contents, so
nothing here is percent-encoded or quoted beyond what the templates themselves contain.
"""

from __future__ import annotations

SHERLOG_URL_TEMPLATE = (
    "https://sherlog-raffia.corp.google.com/dataid?systems=raffia&config=Raffia-Prod&dataid={source_url}"
)

ANCHOR_DATA_RECIPE = "websearch-anchors"

ANCHOR_DATA_SQL_TEMPLATE = (
    "$ span sql /span/global/raffia-spanner:{recipe}.recipe "
    "\"select * from RaffiaRecords where prefix=b'anchorData' and row_key=b'{ecn}' "
    "and secondary_key=b'{anchor_identifier}'\"; "
)

OUTLINKS_INFO_SQL_TEMPLATE = (
    "$ span sql /span/global/raffia-spanner:{corpus}.recipe "
    "\"select * from RaffiaRecords where prefix=b'outlinksInfo' and row_key=b'{source_url}' "
    "and secondary_key=b'outlink:{secondary_key}' and split={split};\""
)

OUTLINK_SECONDARY_KEY_SEPARATOR = ":"

REPORT_SEPARATOR = "----------------------"

REPORT_TEMPLATE = (
    "{separator}\n"
    "Sherlog Query:\n{sherlog}\n\n"
    "anchorData Spanner Query:\n{anchor_data}\n\n"
    "outlinksInfo Spanner Query:\n{outlinks_info}"
)
