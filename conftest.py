from clparser import parser

parser.TESTING = True
