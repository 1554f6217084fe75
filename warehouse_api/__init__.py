"""HTTP API over the OLTP order tables and the Power BI warehouse tables."""

__version__ = "1.0.0"
