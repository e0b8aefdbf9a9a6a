from functools import wraps
import subprocess


# Everything in here is unsigned and at most this wide.
UINT64_MAX = (1 << 64) - 1

_SELECTIONS = {
    '+': 'clipboard',
    '*': 'primary',
}


def store_selection(data, selection='+'):
    '''
    Put text on an X11 selection, through xclip.
    '''
    with subprocess.Popen(['xclip',
                           '-selection', _SELECTIONS[selection]],
                          stdin=subprocess.PIPE) as xclip:
        xclip.stdin.write(str(data).encode())


def load_selection(selection='+'):
    '''
    Read text back from an X11 selection, through xclip.
    '''
    with subprocess.Popen(['xclip',
                           '-selection', _SELECTIONS[selection],
                           '-o'], stdout=subprocess.PIPE) as xclip:
        return xclip.stdout.read().decode()


class CalcError(Exception):
    pass


def wrap_user_errors(fmt):
    '''
    Decorator that converts stray exceptions from user commands to CalcErrors.

    Passes through CalcErrors. The original exception is kept as the cause.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise CalcError(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator
