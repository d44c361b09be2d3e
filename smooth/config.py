'''
global config
read at call time, so changing it affects later calls only

width is the bit count of the unsigned integer type every product must fit in
with verbose being True, the command line prints a summary to stderr
'''

smooth_config = {
    'width': 64,
    'verbose': False
}


def resolve_width(width):
    '''width=None means the configured default'''
    return smooth_config['width'] if width is None else width
