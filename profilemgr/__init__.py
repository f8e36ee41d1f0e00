"""profilemgr - command line front end for profile_library."""
