"""Constants for license-file-generator."""

# Exit codes
EXIT_SUCCESS = 0  # Every dependency has a license
EXIT_ISSUES = 1  # At least one dependency has no license information
EXIT_ERROR = 2  # Generation failed due to error

# Placeholder content for dependencies with no license file or license type
UNKNOWN_LICENSE = "Unknown license!"

# Separator between license groups in the generated text file
GROUP_SEPARATOR = "-----------"

LINE_ENDINGS = {"lf": "\n", "crlf": "\r\n"}

LEGAL_DISCLAIMER = (
    "This file lists license information for informational purposes only. "
    "It does not constitute legal advice. Consult a qualified attorney for "
    "legal guidance on license compliance."
)
