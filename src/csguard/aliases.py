from csguard.core.models import AlgorithmId

ALGORITHM_CHOICES = [algorithm.value for algorithm in AlgorithmId]

ALGORITHM_HELP_TEXT = (
    "Digest algorithm:\n"
    "  md5    : MD5, 32 hex chars (default)\n"
    "  sha256 : SHA-256, 64 hex chars\n"
    "  sha512 : SHA-512, 128 hex chars\n"
)

OUTPUT_HELP_TEXT = (
    "Where to write the result. Default: table printed to stdout.\n"
    "A file name selects the format by its extension: .txt, .json, .yaml"
)

EPILOG_TEXT = """
Examples:
  Checksum of a single file, printed as a table
  %(prog)s calculate --input-file=a.txt

  Checksums of every file under a folder, saved as JSON
  %(prog)s calculate --input-folder=data --output=sums.json --algorithm=sha256

  Check one file against a known digest
  %(prog)s validate --input-file=a.txt --checksum=5d41402abc4b2a76b9719d911017c592

  Check every file listed in a checksum file, write verdicts as YAML
  %(prog)s validate --checksum-file=sums.json --algorithm=sha256 --output=report.yaml
"""
