"""
CLI Module
---------
Line oriented command line front end. Reads one input per line from a file or
stdin, calls the client once per line and prints each result as plain text or
JSON. The first failing line stops the run.
"""
