"""
Countries offered on the signup form

Ids are the res.country ids of a stock Odoo database; the clone workflow
writes them to the company record.
"""

from typing import List

from odoo_signup.schemas.signup import Country

DEFAULT_COUNTRY_CODE = "PH"

COUNTRIES: List[Country] = sorted(
    [
        Country(id=15, code="AX", name="Åland Islands"),
        Country(id=3, code="AF", name="Afghanistan"),
        Country(id=6, code="AL", name="Albania"),
        Country(id=62, code="DZ", name="Algeria"),
        Country(id=11, code="AS", name="American Samoa"),
        Country(id=1, code="AD", name="Andorra"),
        Country(id=8, code="AO", name="Angola"),
        Country(id=5, code="AI", name="Anguilla"),
        Country(id=9, code="AQ", name="Antarctica"),
        Country(id=4, code="AG", name="Antigua and Barbuda"),
        Country(id=10, code="AR", name="Argentina"),
        Country(id=7, code="AM", name="Armenia"),
        Country(id=14, code="AW", name="Aruba"),
        Country(id=13, code="AU", name="Australia"),
        Country(id=12, code="AT", name="Austria"),
        Country(id=16, code="AZ", name="Azerbaijan"),
        Country(id=32, code="BS", name="Bahamas"),
        Country(id=23, code="BH", name="Bahrain"),
        Country(id=19, code="BD", name="Bangladesh"),
        Country(id=18, code="BB", name="Barbados"),
        Country(id=36, code="BY", name="Belarus"),
        Country(id=20, code="BE", name="Belgium"),
        Country(id=37, code="BZ", name="Belize"),
        Country(id=25, code="BJ", name="Benin"),
        Country(id=27, code="BM", name="Bermuda"),
        Country(id=33, code="BT", name="Bhutan"),
        Country(id=29, code="BO", name="Bolivia"),
        Country(id=30, code="BQ", name="Bonaire, Sint Eustatius and Saba"),
        Country(id=17, code="BA", name="Bosnia and Herzegovina"),
        Country(id=35, code="BW", name="Botswana"),
        Country(id=34, code="BV", name="Bouvet Island"),
        Country(id=31, code="BR", name="Brazil"),
        Country(id=105, code="IO", name="British Indian Ocean Territory"),
        Country(id=28, code="BN", name="Brunei Darussalam"),
        Country(id=22, code="BG", name="Bulgaria"),
        Country(id=21, code="BF", name="Burkina Faso"),
        Country(id=24, code="BI", name="Burundi"),
        Country(id=116, code="KH", name="Cambodia"),
        Country(id=47, code="CM", name="Cameroon"),
        Country(id=38, code="CA", name="Canada"),
        Country(id=52, code="CV", name="Cape Verde"),
        Country(id=123, code="KY", name="Cayman Islands"),
        Country(id=40, code="CF", name="Central African Republic"),
        Country(id=214, code="TD", name="Chad"),
        Country(id=46, code="CL", name="Chile"),
        Country(id=48, code="CN", name="China"),
        Country(id=54, code="CX", name="Christmas Island"),
        Country(id=39, code="CC", name="Cocos (Keeling) Islands"),
        Country(id=49, code="CO", name="Colombia"),
        Country(id=118, code="KM", name="Comoros"),
        Country(id=42, code="CG", name="Congo"),
        Country(id=45, code="CK", name="Cook Islands"),
        Country(id=50, code="CR", name="Costa Rica"),
        Country(id=97, code="HR", name="Croatia"),
        Country(id=51, code="CU", name="Cuba"),
        Country(id=53, code="CW", name="Curaçao"),
        Country(id=55, code="CY", name="Cyprus"),
        Country(id=56, code="CZ", name="Czech Republic"),
        Country(id=44, code="CI", name="Côte d'Ivoire"),
        Country(id=41, code="CD", name="Democratic Republic of the Congo"),
        Country(id=59, code="DK", name="Denmark"),
        Country(id=58, code="DJ", name="Djibouti"),
        Country(id=60, code="DM", name="Dominica"),
        Country(id=61, code="DO", name="Dominican Republic"),
        Country(id=63, code="EC", name="Ecuador"),
        Country(id=65, code="EG", name="Egypt"),
        Country(id=209, code="SV", name="El Salvador"),
        Country(id=87, code="GQ", name="Equatorial Guinea"),
        Country(id=67, code="ER", name="Eritrea"),
        Country(id=64, code="EE", name="Estonia"),
        Country(id=212, code="SZ", name="Eswatini"),
        Country(id=69, code="ET", name="Ethiopia"),
        Country(id=72, code="FK", name="Falkland Islands"),
        Country(id=74, code="FO", name="Faroe Islands"),
        Country(id=71, code="FJ", name="Fiji"),
        Country(id=70, code="FI", name="Finland"),
        Country(id=75, code="FR", name="France"),
        Country(id=79, code="GF", name="French Guiana"),
        Country(id=174, code="PF", name="French Polynesia"),
        Country(id=215, code="TF", name="French Southern Territories"),
        Country(id=76, code="GA", name="Gabon"),
        Country(id=84, code="GM", name="Gambia"),
        Country(id=78, code="GE", name="Georgia"),
        Country(id=57, code="DE", name="Germany"),
        Country(id=80, code="GH", name="Ghana"),
        Country(id=81, code="GI", name="Gibraltar"),
        Country(id=88, code="GR", name="Greece"),
        Country(id=83, code="GL", name="Greenland"),
        Country(id=77, code="GD", name="Grenada"),
        Country(id=86, code="GP", name="Guadeloupe"),
        Country(id=91, code="GU", name="Guam"),
        Country(id=90, code="GT", name="Guatemala"),
        Country(id=82, code="GG", name="Guernsey"),
        Country(id=85, code="GN", name="Guinea"),
        Country(id=92, code="GW", name="Guinea-Bissau"),
        Country(id=93, code="GY", name="Guyana"),
        Country(id=98, code="HT", name="Haiti"),
        Country(id=95, code="HM", name="Heard Island and McDonald Islands"),
        Country(id=236, code="VA", name="Holy See (Vatican City State)"),
        Country(id=96, code="HN", name="Honduras"),
        Country(id=94, code="HK", name="Hong Kong"),
        Country(id=99, code="HU", name="Hungary"),
        Country(id=108, code="IS", name="Iceland"),
        Country(id=104, code="IN", name="India"),
        Country(id=100, code="ID", name="Indonesia"),
        Country(id=107, code="IR", name="Iran"),
        Country(id=106, code="IQ", name="Iraq"),
        Country(id=101, code="IE", name="Ireland"),
        Country(id=103, code="IM", name="Isle of Man"),
        Country(id=102, code="IL", name="Israel"),
        Country(id=109, code="IT", name="Italy"),
        Country(id=111, code="JM", name="Jamaica"),
        Country(id=113, code="JP", name="Japan"),
        Country(id=110, code="JE", name="Jersey"),
        Country(id=112, code="JO", name="Jordan"),
        Country(id=124, code="KZ", name="Kazakhstan"),
        Country(id=114, code="KE", name="Kenya"),
        Country(id=117, code="KI", name="Kiribati"),
        Country(id=250, code="XK", name="Kosovo"),
        Country(id=122, code="KW", name="Kuwait"),
        Country(id=115, code="KG", name="Kyrgyzstan"),
        Country(id=125, code="LA", name="Laos"),
        Country(id=134, code="LV", name="Latvia"),
        Country(id=126, code="LB", name="Lebanon"),
        Country(id=131, code="LS", name="Lesotho"),
        Country(id=130, code="LR", name="Liberia"),
        Country(id=135, code="LY", name="Libya"),
        Country(id=128, code="LI", name="Liechtenstein"),
        Country(id=132, code="LT", name="Lithuania"),
        Country(id=133, code="LU", name="Luxembourg"),
        Country(id=147, code="MO", name="Macau"),
        Country(id=141, code="MG", name="Madagascar"),
        Country(id=155, code="MW", name="Malawi"),
        Country(id=157, code="MY", name="Malaysia"),
        Country(id=154, code="MV", name="Maldives"),
        Country(id=144, code="ML", name="Mali"),
        Country(id=152, code="MT", name="Malta"),
        Country(id=142, code="MH", name="Marshall Islands"),
        Country(id=149, code="MQ", name="Martinique"),
        Country(id=150, code="MR", name="Mauritania"),
        Country(id=153, code="MU", name="Mauritius"),
        Country(id=246, code="YT", name="Mayotte"),
        Country(id=156, code="MX", name="Mexico"),
        Country(id=73, code="FM", name="Micronesia"),
        Country(id=138, code="MD", name="Moldova"),
        Country(id=137, code="MC", name="Monaco"),
        Country(id=146, code="MN", name="Mongolia"),
        Country(id=139, code="ME", name="Montenegro"),
        Country(id=151, code="MS", name="Montserrat"),
        Country(id=136, code="MA", name="Morocco"),
        Country(id=158, code="MZ", name="Mozambique"),
        Country(id=145, code="MM", name="Myanmar"),
        Country(id=159, code="NA", name="Namibia"),
        Country(id=168, code="NR", name="Nauru"),
        Country(id=167, code="NP", name="Nepal"),
        Country(id=165, code="NL", name="Netherlands"),
        Country(id=160, code="NC", name="New Caledonia"),
        Country(id=170, code="NZ", name="New Zealand"),
        Country(id=164, code="NI", name="Nicaragua"),
        Country(id=161, code="NE", name="Niger"),
        Country(id=163, code="NG", name="Nigeria"),
        Country(id=169, code="NU", name="Niue"),
        Country(id=162, code="NF", name="Norfolk Island"),
        Country(id=120, code="KP", name="North Korea"),
        Country(id=143, code="MK", name="North Macedonia"),
        Country(id=148, code="MP", name="Northern Mariana Islands"),
        Country(id=166, code="NO", name="Norway"),
        Country(id=171, code="OM", name="Oman"),
        Country(id=177, code="PK", name="Pakistan"),
        Country(id=184, code="PW", name="Palau"),
        Country(id=172, code="PA", name="Panama"),
        Country(id=175, code="PG", name="Papua New Guinea"),
        Country(id=185, code="PY", name="Paraguay"),
        Country(id=173, code="PE", name="Peru"),
        Country(id=176, code="PH", name="Philippines"),
        Country(id=180, code="PN", name="Pitcairn Islands"),
        Country(id=178, code="PL", name="Poland"),
        Country(id=183, code="PT", name="Portugal"),
        Country(id=181, code="PR", name="Puerto Rico"),
        Country(id=186, code="QA", name="Qatar"),
        Country(id=188, code="RO", name="Romania"),
        Country(id=190, code="RU", name="Russian Federation"),
        Country(id=191, code="RW", name="Rwanda"),
        Country(id=187, code="RE", name="Réunion"),
        Country(id=26, code="BL", name="Saint Barthélémy"),
        Country(id=198, code="SH", name="Saint Helena, Ascension and Tristan da Cunha"),
        Country(id=119, code="KN", name="Saint Kitts and Nevis"),
        Country(id=127, code="LC", name="Saint Lucia"),
        Country(id=140, code="MF", name="Saint Martin (French part)"),
        Country(id=179, code="PM", name="Saint Pierre and Miquelon"),
        Country(id=237, code="VC", name="Saint Vincent and the Grenadines"),
        Country(id=244, code="WS", name="Samoa"),
        Country(id=203, code="SM", name="San Marino"),
        Country(id=192, code="SA", name="Saudi Arabia"),
        Country(id=204, code="SN", name="Senegal"),
        Country(id=189, code="RS", name="Serbia"),
        Country(id=194, code="SC", name="Seychelles"),
        Country(id=202, code="SL", name="Sierra Leone"),
        Country(id=197, code="SG", name="Singapore"),
        Country(id=210, code="SX", name="Sint Maarten (Dutch part)"),
        Country(id=201, code="SK", name="Slovakia"),
        Country(id=199, code="SI", name="Slovenia"),
        Country(id=193, code="SB", name="Solomon Islands"),
        Country(id=205, code="SO", name="Somalia"),
        Country(id=247, code="ZA", name="South Africa"),
        Country(id=89, code="GS", name="South Georgia and the South Sandwich Islands"),
        Country(id=121, code="KR", name="South Korea"),
        Country(id=207, code="SS", name="South Sudan"),
        Country(id=68, code="ES", name="Spain"),
        Country(id=129, code="LK", name="Sri Lanka"),
        Country(id=182, code="PS", name="State of Palestine"),
        Country(id=195, code="SD", name="Sudan"),
        Country(id=206, code="SR", name="Suriname"),
        Country(id=200, code="SJ", name="Svalbard and Jan Mayen"),
        Country(id=196, code="SE", name="Sweden"),
        Country(id=43, code="CH", name="Switzerland"),
        Country(id=211, code="SY", name="Syria"),
        Country(id=208, code="ST", name="São Tomé and Príncipe"),
        Country(id=227, code="TW", name="Taiwan"),
        Country(id=218, code="TJ", name="Tajikistan"),
        Country(id=228, code="TZ", name="Tanzania"),
        Country(id=217, code="TH", name="Thailand"),
        Country(id=223, code="TL", name="Timor-Leste"),
        Country(id=216, code="TG", name="Togo"),
        Country(id=219, code="TK", name="Tokelau"),
        Country(id=222, code="TO", name="Tonga"),
        Country(id=225, code="TT", name="Trinidad and Tobago"),
        Country(id=221, code="TN", name="Tunisia"),
        Country(id=220, code="TM", name="Turkmenistan"),
        Country(id=213, code="TC", name="Turks and Caicos Islands"),
        Country(id=226, code="TV", name="Tuvalu"),
        Country(id=224, code="TR", name="Türkiye"),
        Country(id=232, code="UM", name="USA Minor Outlying Islands"),
        Country(id=230, code="UG", name="Uganda"),
        Country(id=229, code="UA", name="Ukraine"),
        Country(id=2, code="AE", name="United Arab Emirates"),
        Country(id=231, code="GB", name="United Kingdom"),
        Country(id=233, code="US", name="United States"),
        Country(id=234, code="UY", name="Uruguay"),
        Country(id=235, code="UZ", name="Uzbekistan"),
        Country(id=242, code="VU", name="Vanuatu"),
        Country(id=238, code="VE", name="Venezuela"),
        Country(id=241, code="VN", name="Vietnam"),
        Country(id=239, code="VG", name="Virgin Islands (British)"),
        Country(id=240, code="VI", name="Virgin Islands (USA)"),
        Country(id=243, code="WF", name="Wallis and Futuna"),
        Country(id=66, code="EH", name="Western Sahara"),
        Country(id=245, code="YE", name="Yemen"),
        Country(id=248, code="ZM", name="Zambia"),
        Country(id=249, code="ZW", name="Zimbabwe"),
    ],
    key=lambda country: country.name,
)
