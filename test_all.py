'''
this script checks all test scripts in tests directory
it runs every script, detects pass/failure based on return code, and report that
pytest also picks up test_all() below, which fails if any script failed
'''

import os
import glob
import subprocess
import sys

ROOT = os.path.dirname(os.path.abspath(__file__))


def run_all():
    all_fpaths = glob.glob(os.path.join(ROOT, 'tests/test_*.py'))
    all_fpaths.sort()
    env = dict(os.environ, PYTHONPATH=ROOT)
    failed = []
    for fpath in all_fpaths:
        completed = subprocess.run(
            [sys.executable, fpath], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL, env=env)
        retcode = completed.returncode
        status = 'PASSED' if retcode == 0 else 'FAILED (%d)' % retcode
        bname = os.path.basename(fpath)
        print('%s: %s' % (bname, status))
        if retcode != 0:
            failed.append(bname)
    return failed


def test_all():
    assert run_all() == []


if __name__ == '__main__':
    sys.exit(1 if run_all() else 0)
