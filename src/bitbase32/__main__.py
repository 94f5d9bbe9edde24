"""
Command line wrapper around encode() and decode().

    python -m bitbase32 [-d] [-i FILE] [-o FILE] [--debug]

Without -d, raw bytes are read and Base32 text is written followed by a newline.
With -d, Base32 text is read (surrounding whitespace ignored) and raw bytes are written.
"""
import argparse
import contextlib
import sys
import logarhythm
from . import codec

def build_parser():
    parser = argparse.ArgumentParser(prog='bitbase32',description='RFC 3548 Base32 encode or decode data.')
    parser.add_argument(\
        '-d','--decode',
        help='Decode Base32 text instead of encoding bytes.',
        action='store_true')
    parser.add_argument(\
        '-i','--input',
        help='Read from this file instead of stdin.')
    parser.add_argument(\
        '-o','--output',
        help='Write to this file instead of stdout.')
    parser.add_argument(\
        '--debug',
        help='Log each call and group at debug level.',
        action='store_true')
    return parser

def run(args,infile,outfile,stderr):
    """
    Encodes or decodes infile into outfile. Returns the exit status.
    """
    data = infile.read()
    if not args.decode:
        outfile.write(codec.encode(data).encode('ascii')+b'\n')
        return 0
    result = codec.try_decode(data.strip())
    if not result.success:
        stderr.write('error: %s\n' % result.summary())
        return 1
    outfile.write(result.data)
    return 0

def main(argv=None,stdin=None,stdout=None,stderr=None):
    """
    Runs the command line and returns the exit status.
    stdin and stdout are binary streams, stderr is a text stream.
    """
    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout.buffer
    stderr = stderr if stderr is not None else sys.stderr

    args = build_parser().parse_args(argv)
    if args.debug:
        codec.logger.level = logarhythm.DEBUG

    try:
        with contextlib.ExitStack() as stack:
            infile = stack.enter_context(open(args.input,'rb')) if args.input else stdin
            outfile = stack.enter_context(open(args.output,'wb')) if args.output else stdout
            return run(args,infile,outfile,stderr)
    except OSError as e:
        stderr.write('error: %s\n' % str(e))
        return 1

if __name__ == '__main__':
    sys.exit(main())
