import sys

from rich.pretty import pprint

from docu import Application, DryRunGenerator, Outcome


application = Application(DryRunGenerator(), fancy=True)


if __name__ == '__main__':
    pprint(application.switches)
    sys.exit(application.run(sys.argv[1:]) is Outcome.FAILED)
