# mirror <sysexits.h>
EXIT_OK = 0  # Normal success
EXIT_USAGE = 64  # Invalid command line option value (e.g., bad --excludes regex)
EXIT_DATAERR = 65  # Input data was invalid (e.g., tracefile is not UTF-8)
EXIT_NOINPUT = 66  # Input file not found (e.g., tracefile missing)
EXIT_IOERR = 74  # Reading the tracefile or writing the report failed
