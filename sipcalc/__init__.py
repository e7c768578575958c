"""SIP, lumpsum and SWP projection backend."""
