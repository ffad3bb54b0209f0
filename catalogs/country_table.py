# WORKFLOW: Static ISO 3166-1 alpha-2 country table.
# Used by: catalogs.country_catalog
# Each row: (code, customs name in Spanish, English name). Both names are
# indexed for name -> code lookups; the Spanish name is the display name.

COUNTRIES = (
    ("AD", "ANDORRA", "Andorra"),
    ("AE", "EMIRATOS ARABES UNIDOS", "United Arab Emirates"),
    ("AF", "AFGANISTAN", "Afghanistan"),
    ("AG", "ANTIGUA Y BARBUDA", "Antigua and Barbuda"),
    ("AI", "ANGUILA", "Anguilla"),
    ("AL", "ALBANIA", "Albania"),
    ("AM", "ARMENIA", "Armenia"),
    ("AN", "ANTILLAS HOLANDESAS", "Netherlands Antilles"),
    ("AO", "ANGOLA", "Angola"),
    ("AQ", "ANTARTIDA", "Antarctica"),
    ("AR", "ARGENTINA", "Argentina"),
    ("AS", "SAMOA AMERICANA", "American Samoa"),
    ("AT", "AUSTRIA", "Austria"),
    ("AU", "AUSTRALIA", "Australia"),
    ("AW", "ARUBA", "Aruba"),
    ("AX", "ALAND, ISLAS", "Aland Islands"),
    ("AZ", "AZERBAIYAN", "Azerbaijan"),
    ("BA", "BOSNIA Y HERZEGOVINA", "Bosnia and Herzegovina"),
    ("BB", "BARBADOS", "Barbados"),
    ("BD", "BANGLADESH", "Bangladesh"),
    ("BE", "BELGICA", "Belgium"),
    ("BF", "BURKINA FASO", "Burkina Faso"),
    ("BG", "BULGARIA", "Bulgaria"),
    ("BH", "BAHREIN", "Bahrain"),
    ("BI", "BURUNDI", "Burundi"),
    ("BJ", "BENIN", "Benin"),
    ("BL", "SAN BARTOLOME", "Saint Barthelemy"),
    ("BM", "BERMUDAS", "Bermuda"),
    ("BN", "BRUNEI", "Brunei Darussalam"),
    ("BO", "BOLIVIA, ESTADO PLURINACIONAL DE", "Bolivia"),
    ("BQ", "BONAIRE, SAN EUSTAQUIO Y SABA", "Bonaire, Sint Eustatius and Saba"),
    ("BR", "BRASIL", "Brazil"),
    ("BS", "BAHAMAS", "Bahamas"),
    ("BT", "BHUTAN", "Bhutan"),
    ("BV", "BOUVET, ISLA", "Bouvet Island"),
    ("BW", "BOTSWANA", "Botswana"),
    ("BY", "BELARUS", "Belarus"),
    ("BZ", "BELICE", "Belize"),
    ("CA", "CANADA", "Canada"),
    ("CC", "COCOS (KEELING), ISLAS", "Cocos (Keeling) Islands"),
    ("CD", "CONGO, LA REPUBLICA DEMOCRATICA DEL", "Congo, Democratic Republic of the"),
    ("CF", "AFRICA CENTRAL, REPUBLICA DE", "Central African Republic"),
    ("CG", "CONGO", "Congo, Republic of the"),
    ("CH", "SUIZA", "Switzerland"),
    ("CI", "COSTA DE MARFIL", "Cote d'Ivoire"),
    ("CK", "COOK, ISLAS", "Cook Islands"),
    ("CL", "CHILE", "Chile"),
    ("CM", "CAMERUN", "Cameroon"),
    ("CN", "CHINA", "China"),
    ("CO", "COLOMBIA", "Colombia"),
    ("CR", "COSTA RICA", "Costa Rica"),
    ("CU", "CUBA", "Cuba"),
    ("CV", "CABO VERDE", "Cabo Verde"),
    ("CW", "CURAÇAO", "Curaçao"),
    ("CX", "NAVIDAD, ISLA", "Christmas Island"),
    ("CY", "CHIPRE", "Cyprus"),
    ("CZ", "REPUBLICA CHECA", "Czechia"),
    ("DE", "ALEMANIA", "Germany"),
    ("DJ", "DJIBOUTI", "Djibouti"),
    ("DK", "DINAMARCA", "Denmark"),
    ("DM", "DOMINICA", "Dominica"),
    ("DO", "REPUBLICA DOMINICANA", "Dominican Republic"),
    ("DZ", "ARGELIA", "Algeria"),
    ("EC", "ECUADOR", "Ecuador"),
    ("EE", "ESTONIA", "Estonia"),
    ("EG", "EGIPTO", "Egypt"),
    ("EH", "SAHARA OCCIDENTAL", "Western Sahara"),
    ("ER", "ERITREA", "Eritrea"),
    ("ES", "ESPAÑA", "Spain"),
    ("ET", "ETIOPIA", "Ethiopia"),
    ("FI", "FINLANDIA", "Finland"),
    ("FJ", "FIYI", "Fiji"),
    ("FK", "MALVINAS, ISLAS (FALKLAND)", "Falkland Islands (Malvinas)"),
    ("FM", "MICRONESIA, ESTADOS FEDERADOS DE", "Micronesia, Federated States of"),
    ("FO", "FEROE, ISLAS", "Faroe Islands"),
    ("FR", "FRANCIA", "France"),
    ("GA", "GABON", "Gabon"),
    ("GB", "REINO UNIDO", "United Kingdom"),
    ("GD", "GRANADA", "Grenada"),
    ("GE", "GEORGIA", "Georgia"),
    ("GF", "GUAYANA FRANCESA", "French Guiana"),
    ("GG", "GUERNSEY", "Guernsey"),
    ("GH", "GHANA", "Ghana"),
    ("GI", "GIBRALTAR", "Gibraltar"),
    ("GL", "GROENLANDIA", "Greenland"),
    ("GM", "GAMBIA", "Gambia"),
    ("GN", "GUINEA", "Guinea"),
    ("GP", "GUADELUPE", "Guadeloupe"),
    ("GQ", "GUINEA ECUATORIAL", "Equatorial Guinea"),
    ("GR", "GRECIA", "Greece"),
    ("GS", "GEORGIA DEL SUR E ISLAS SANDWICH DEL SUR", "South Georgia and the South Sandwich Islands"),
    ("GT", "GUATEMALA", "Guatemala"),
    ("GU", "GUAM", "Guam"),
    ("GW", "GUINEA-BISSAU", "Guinea-Bissau"),
    ("GY", "GUYANA", "Guyana"),
    ("HK", "HONG KONG", "Hong Kong"),
    ("HM", "HEARD Y MCDONALD, ISLAS", "Heard Island and McDonald Islands"),
    ("HN", "HONDURAS", "Honduras"),
    ("HR", "CROACIA", "Croatia"),
    ("HT", "HAITI", "Haiti"),
    ("HU", "HUNGRIA", "Hungary"),
    ("ID", "INDONESIA", "Indonesia"),
    ("IE", "IRLANDA", "Ireland"),
    ("IL", "ISRAEL", "Israel"),
    ("IM", "ISLA DE MAN", "Isle of Man"),
    ("IN", "INDIA", "India"),
    ("IO", "TERRITORIO BRITANICO DEL OCEANO INDICO", "British Indian Ocean Territory"),
    ("IQ", "IRAQ", "Iraq"),
    ("IR", "IRAN, REPUBLICA ISLAMICA DE", "Iran"),
    ("IS", "ISLANDIA", "Iceland"),
    ("IT", "ITALIA", "Italy"),
    ("JE", "JERSEY", "Jersey"),
    ("JM", "JAMAICA", "Jamaica"),
    ("JO", "JORDANIA", "Jordan"),
    ("JP", "JAPON", "Japan"),
    ("KE", "KENIA", "Kenya"),
    ("KG", "KIRGUISTAN", "Kyrgyzstan"),
    ("KH", "CAMBOYA", "Cambodia"),
    ("KI", "KIRIBATI", "Kiribati"),
    ("KM", "COMORAS", "Comoros"),
    ("KN", "SAN CRISTOBAL Y NIEVES", "Saint Kitts and Nevis"),
    ("KP", "COREA, REPUBLICA POPULAR DEMOCRATICA DE", "North Korea"),
    ("KR", "COREA, REPUBLICA DE", "South Korea"),
    ("KW", "KUWAIT", "Kuwait"),
    ("KY", "CAIMAN, ISLAS", "Cayman Islands"),
    ("KZ", "KAZAJSTAN", "Kazakhstan"),
    ("LA", "LAO, REPUBLICA DEMOCRATICA POPULAR", "Laos"),
    ("LB", "LIBANO", "Lebanon"),
    ("LC", "SANTA LUCIA", "Saint Lucia"),
    ("LI", "LIECHTENSTEIN", "Liechtenstein"),
    ("LK", "SRI LANKA", "Sri Lanka"),
    ("LR", "LIBERIA", "Liberia"),
    ("LS", "LESOTHO", "Lesotho"),
    ("LT", "LITUANIA", "Lithuania"),
    ("LU", "LUXEMBURGO", "Luxembourg"),
    ("LV", "LETONIA", "Latvia"),
    ("LY", "LIBIA", "Libya"),
    ("MA", "MARRUECOS", "Morocco"),
    ("MC", "MONACO", "Monaco"),
    ("MD", "MOLDAVIA, REPUBLICA DE", "Moldova"),
    ("ME", "MONTENEGRO", "Montenegro"),
    ("MF", "SAN MARTIN (PARTE FRANCESA)", "Saint Martin (French part)"),
    ("MG", "MADAGASCAR", "Madagascar"),
    ("MH", "MARSHALL, ISLAS", "Marshall Islands"),
    ("MK", "MACEDONIA DEL NORTE", "North Macedonia"),
    ("ML", "MALI", "Mali"),
    ("MM", "MYANMAR", "Myanmar"),
    ("MN", "MONGOLIA", "Mongolia"),
    ("MO", "MACAO", "Macao"),
    ("MP", "MARIANAS DEL NORTE, ISLAS", "Northern Mariana Islands"),
    ("MQ", "MARTINICA", "Martinique"),
    ("MR", "MAURITANIA", "Mauritania"),
    ("MS", "MONTSERRAT", "Montserrat"),
    ("MT", "MALTA", "Malta"),
    ("MU", "MAURICIO", "Mauritius"),
    ("MV", "MALDIVAS", "Maldives"),
    ("MW", "MALAWI", "Malawi"),
    ("MX", "MEXICO", "Mexico"),
    ("MY", "MALASIA", "Malaysia"),
    ("MZ", "MOZAMBIQUE", "Mozambique"),
    ("NA", "NAMIBIA", "Namibia"),
    ("NC", "NUEVA CALEDONIA", "New Caledonia"),
    ("NE", "NIGER", "Niger"),
    ("NF", "NORFOLK, ISLA", "Norfolk Island"),
    ("NG", "NIGERIA", "Nigeria"),
    ("NI", "NICARAGUA", "Nicaragua"),
    ("NL", "PAISES BAJOS", "Netherlands"),
    ("NO", "NORUEGA", "Norway"),
    ("NP", "NEPAL", "Nepal"),
    ("NR", "NAURU", "Nauru"),
    ("NU", "NIUE", "Niue"),
    ("NZ", "NUEVA ZELANDA", "New Zealand"),
    ("OM", "OMAN", "Oman"),
    ("PA", "PANAMA", "Panama"),
    ("PE", "PERU", "Peru"),
    ("PF", "POLINESIA FRANCESA", "French Polynesia"),
    ("PG", "PAPUA NUEVA GUINEA", "Papua New Guinea"),
    ("PH", "FILIPINAS", "Philippines"),
    ("PK", "PAKISTAN", "Pakistan"),
    ("PL", "POLONIA", "Poland"),
    ("PM", "SAN PEDRO Y MIQUELON", "Saint Pierre and Miquelon"),
    ("PN", "PITCAIRN", "Pitcairn"),
    ("PR", "PUERTO RICO", "Puerto Rico"),
    ("PS", "TERRITORIO PALESTINO OCUPADO", "Palestine, State of"),
    ("PT", "PORTUGAL", "Portugal"),
    ("PW", "PALAU", "Palau"),
    ("PY", "PARAGUAY", "Paraguay"),
    ("QA", "QATAR", "Qatar"),
    ("RE", "REUNION", "Reunion"),
    ("RO", "RUMANIA", "Romania"),
    ("RS", "SERBIA", "Serbia"),
    ("RU", "FEDERACION DE RUSIA", "Russian Federation"),
    ("RW", "RUANDA", "Rwanda"),
    ("SA", "ARABIA SAUDITA", "Saudi Arabia"),
    ("SB", "SALOMON, ISLAS", "Solomon Islands"),
    ("SC", "SEYCHELLES", "Seychelles"),
    ("SD", "SUDAN", "Sudan"),
    ("SE", "SUECIA", "Sweden"),
    ("SG", "SINGAPUR", "Singapore"),
    ("SH", "SANTA ELENA, ASCENSION Y TRISTAN DE CUNHA", "Saint Helena, Ascension and Tristan da Cunha"),
    ("SI", "ESLOVENIA", "Slovenia"),
    ("SJ", "SVALBARD Y JAN MAYEN", "Svalbard and Jan Mayen"),
    ("SK", "ESLOVAQUIA", "Slovakia"),
    ("SL", "SIERRA LEONA", "Sierra Leone"),
    ("SM", "SAN MARINO", "San Marino"),
    ("SN", "SENEGAL", "Senegal"),
    ("SO", "SOMALIA", "Somalia"),
    ("SR", "SURINAM", "Suriname"),
    ("SS", "SUDAN DEL SUR", "South Sudan"),
    ("ST", "SANTO TOME Y PRINCIPE", "Sao Tome and Principe"),
    ("SV", "EL SALVADOR", "El Salvador"),
    ("SX", "SINT MAARTEN (PARTE HOLANDESA)", "Sint Maarten (Dutch part)"),
    ("SY", "REPUBLICA ARABE SIRIA", "Syrian Arab Republic"),
    ("SZ", "ESWATINI", "Eswatini"),
    ("TC", "TURCAS Y CAICOS, ISLAS", "Turks and Caicos Islands"),
    ("TD", "CHAD", "Chad"),
    ("TF", "TERRITORIOS AUSTRALES FRANCESES", "French Southern Territories"),
    ("TG", "TOGO", "Togo"),
    ("TH", "TAILANDIA", "Thailand"),
    ("TJ", "TAYIKISTAN", "Tajikistan"),
    ("TK", "TOKELAU", "Tokelau"),
    ("TL", "TIMOR-LESTE", "Timor-Leste"),
    ("TM", "TURKMENISTAN", "Turkmenistan"),
    ("TN", "TUNEZ", "Tunisia"),
    ("TO", "TONGA", "Tonga"),
    ("TR", "TURQUIA", "Turkey"),
    ("TT", "TRINIDAD Y TOBAGO", "Trinidad and Tobago"),
    ("TV", "TUVALU", "Tuvalu"),
    ("TW", "TAIWAN, PROVINCIA DE CHINA", "Taiwan"),
    ("TZ", "TANZANIA, REPUBLICA UNIDA DE", "Tanzania"),
    ("UA", "UCRANIA", "Ukraine"),
    ("UG", "UGANDA", "Uganda"),
    ("UM", "ISLAS MENORES ALEJADAS DE LOS ESTADOS UNIDOS", "United States Minor Outlying Islands"),
    ("US", "ESTADOS UNIDOS", "United States"),
    ("UY", "URUGUAY", "Uruguay"),
    ("UZ", "UZBEKISTAN", "Uzbekistan"),
    ("VA", "SANTA SEDE (CIUDAD DEL VATICANO)", "Holy See (Vatican City State)"),
    ("VC", "SAN VICENTE Y LAS GRANADINAS", "Saint Vincent and the Grenadines"),
    ("VE", "VENEZUELA, REPUBLICA BOLIVARIANA DE", "Venezuela"),
    ("VG", "ISLAS VIRGENES (BRITANICAS)", "Virgin Islands (British)"),
    ("VI", "ISLAS VIRGENES (EE.UU.)", "Virgin Islands (U.S.)"),
    ("VN", "VIET NAM", "Viet Nam"),
    ("VU", "VANUATU", "Vanuatu"),
    ("WF", "WALLIS Y FUTUNA", "Wallis and Futuna"),
    ("WS", "SAMOA", "Samoa"),
    ("YE", "YEMEN", "Yemen"),
    ("YT", "MAYOTTE", "Mayotte"),
    ("ZA", "SUDAFRICA", "South Africa"),
    ("ZM", "ZAMBIA", "Zambia"),
    ("ZW", "ZIMBABWE", "Zimbabwe"),
)
