HEADER_GRAMMAR = r'''
start: entry*

entry: (int_entry | str_entry | color_entry) _SEMICOLON?

int_entry: _MACRO_CONFIG_INT _LPAREN _name _COMMA _name _COMMA _bound _COMMA _bound _COMMA _bound _COMMA flags _COMMA STRING _RPAREN
str_entry: _MACRO_CONFIG_STR _LPAREN _name _COMMA _name _COMMA INTEGER _COMMA STRING _COMMA flags _COMMA STRING _RPAREN
color_entry: _MACRO_CONFIG_COL _LPAREN _name _COMMA _name _COMMA _bound _COMMA flags _COMMA STRING _RPAREN

_name: IDENTIFIER | STRING
_bound: INTEGER | MAX_CLIENTS | SERVERINFO_LEVEL_MIN | SERVERINFO_LEVEL_MAX

flags: _flag (_PIPE _flag)*
_flag: CFGFLAG_SAVE | CFGFLAG_CLIENT | CFGFLAG_SERVER | CFGFLAG_INSENSITIVE | CFGFLAG_NONTEEHISTORIC
     | CFGFLAG_MASTER | CFGFLAG_ECON | CFGFLAG_GAME | CFGFLAG_COLALPHA | CFGFLAG_COLLIGHT

%declare _MACRO_CONFIG_INT _MACRO_CONFIG_STR _MACRO_CONFIG_COL
%declare CFGFLAG_SAVE CFGFLAG_CLIENT CFGFLAG_SERVER CFGFLAG_INSENSITIVE CFGFLAG_NONTEEHISTORIC
%declare CFGFLAG_MASTER CFGFLAG_ECON CFGFLAG_GAME CFGFLAG_COLALPHA CFGFLAG_COLLIGHT
%declare _LPAREN _RPAREN _COMMA _PIPE _SEMICOLON
%declare MAX_CLIENTS SERVERINFO_LEVEL_MIN SERVERINFO_LEVEL_MAX
%declare IDENTIFIER STRING INTEGER
'''


# A file is rows separated by line breaks; a row is either empty or a line.
CONFIG_GRAMMAR = r'''
start: _row (_NEWLINE _row)*

_row: line?

line: IDENTIFIER _value*
_value: INTEGER | STRING | IP | IDENTIFIER

%declare IDENTIFIER STRING INTEGER IP _NEWLINE
'''
