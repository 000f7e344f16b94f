import argparse
import contextlib
import os
import sys

from tqdm import tqdm

from .errors import MissingArgument, TextureHashError, UsageError
from .texhash import hash_texture

DEFAULT_EXTENSIONS = '.txtr'


def eprint(*args, **kwargs):
    print(*args, file=sys.stderr, **kwargs)


def pbprint(message):
    tqdm.write(message, file=sys.stderr)


def find_textures(folder, extensions):
    texlist = []
    for root, _, files in os.walk(folder):
        for file in files:
            fname = os.path.join(root, file)
            if fname.lower().endswith(extensions):
                texlist.append(fname)
    return sorted(texlist)


def hash_directory(args):
    if not os.path.isdir(args.directory):
        eprint(f'Error: {args.directory}: No such directory')
        return 1

    extensions = tuple(x.strip().lower() for x in args.extensions.split(',') if x.strip())
    texlist = find_textures(args.directory, extensions)
    if not texlist:
        eprint('Warning: No textures found')
        return 0

    try:
        out = open(args.output, 'w') if args.output else contextlib.nullcontext(sys.stdout)
    except OSError as e:
        eprint(f'Error: {args.output}: {e.strerror}')
        return 1

    failed = 0
    log = pbprint if args.verbose else None
    with out as hashmap:
        for fname in tqdm(texlist, disable=not args.progress, file=sys.stderr):
            try:
                result = hash_texture(fname, args.byte_order, log)
            except TextureHashError as e:
                pbprint(f'Warning: {fname}: {e}')
                failed += 1
                continue
            hashmap.write(f'{result.identifier} {fname}\n')

    if failed:
        eprint(f'Failed to hash {failed} of {len(texlist)} textures')
        return 1
    return 0


class ArgumentParser(argparse.ArgumentParser):
    # Bad invocations fail with status 1 like every other error
    def error(self, message):
        raise UsageError(f'{self.prog}: error: {message}')


def parse_args(argv=None):
    parser = ArgumentParser(prog='txtrhashgen', description='Generates Dolphin texture names for Metroid Prime TXTR files.')
    parser.add_argument('texture', nargs='?', help='The TXTR file to hash')
    parser.add_argument('-b', '--byte-order', help='Byte order of the texture header', choices=('little', 'big'), default='little')
    parser.add_argument('-v', '--verbose', help='Print each step to stderr', action='store_true')
    parser.add_argument('-d', '--directory', help='Hash every texture in a folder instead of a single file')
    parser.add_argument('-e', '--extensions', help='Comma separated texture extensions for --directory', default=DEFAULT_EXTENSIONS)
    parser.add_argument('-o', '--output', help='Hash map file to write for --directory')
    parser.add_argument('-p', '--progress', help='Show a progress bar for --directory', action='store_true')
    args, extra = parser.parse_known_args(argv)

    if args.directory is not None:
        if args.texture is not None or extra:
            raise UsageError('Error: --directory cannot be combined with a texture file')
        return args

    # Only the first path is hashed, it may look like an option
    if args.texture is None and extra:
        args.texture = extra[0]
    if args.texture is None:
        raise MissingArgument()
    return args


def main(argv=None):
    try:
        args = parse_args(argv)
    except MissingArgument as e:
        print(e)
        return 1
    except UsageError as e:
        eprint(e)
        return 1

    if args.directory is not None:
        return hash_directory(args)

    try:
        result = hash_texture(args.texture, args.byte_order, eprint if args.verbose else None)
    except TextureHashError as e:
        eprint(e)
        return 1

    print(result.identifier)
    return 0
